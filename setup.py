from setuptools import setup

setup(name='strandgate',
    version='0.1a',

    packages=['strandgate', 'strandgate.tests'],
    install_requires=["pyparsing >= 3.0"],
    extras_require={'test': ["pytest"]},
    entry_points={ 'console_scripts': [
        'strandgate-melt = strandgate.compiler:main']},
    exclude_package_data={'': ['*.pyc']},
    description='Melt DNA junction gates into the plain strands they are made of.',
    license='GNU GPLv3',
    keywords='DNA strand displacement gate hairpin junction melt dsd',
    zip_safe=False)
