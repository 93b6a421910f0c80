import os
import shutil
import sys
import unittest
from io import StringIO
from tempfile import mkdtemp

from .. import compiler, utils


class Capturing(list):
    def __enter__(self):
        self._stdout = sys.stdout
        sys.stdout = self._stringio = StringIO()
        return self
    def __exit__(self, *args):
        self.extend(self._stringio.getvalue().splitlines())
        sys.stdout = self._stdout


class TestCompiler(unittest.TestCase):
    gate_text = "toehold t\n# a two armed gate\n2 [ <t a> | [a] : [b] ]\n"
    melted_text = "toehold t\n2 [ <t a> | <a!_0> | <b!_1> | <b*!_1 a*!_0> ]\n"

    def setUp(self):
        self.debug = utils.DEBUG
        utils.DEBUG = False
        self.tdir = mkdtemp(prefix='strandgate_test')
        self.infile = os.path.join(self.tdir, 'gate.dsd')
        self.outfile = os.path.join(self.tdir, 'gate.out')
        self.write(self.gate_text)

    def tearDown(self):
        utils.DEBUG = self.debug
        shutil.rmtree(self.tdir)

    def write(self, text):
        with open(self.infile, 'w') as f:
            f.write(text)

    def test_compile_to_file(self):
        with Capturing() as output:
            compiler.compiler(self.infile, self.outfile)
        with open(self.outfile) as f:
            self.assertEqual(self.melted_text, f.read())
        self.assertEqual("Melting '%s' ..." % self.infile, output[0])
        self.assertEqual("1 complexes, 4 strands, 2 bindings made", output[1])

    def test_quiet(self):
        with Capturing() as output:
            compiler.compiler(self.infile, self.outfile, quiet=True)
        self.assertEqual([], output)

    def test_main_stdout(self):
        """Without --output the model is the only thing printed"""
        with Capturing() as output:
            compiler.main([self.infile])
        self.assertEqual(self.melted_text.splitlines(), output)

    def test_main_enzymes(self):
        self.write("enzymes [ nick(a, b) ]\n<a b>\n")
        with Capturing() as output:
            compiler.main(["--enzymes", self.infile, "-o", self.outfile, "-q"])
        with open(self.outfile) as f:
            self.assertEqual("enzymes [ nick(a, b); ]\n[ <a b> ]\n", f.read())

    def test_load_file(self):
        nicks, (toeholds, complexes) = compiler.load_file(self.infile)
        self.assertEqual([], nicks)
        self.assertEqual(2, complexes[0][0])

    def test_missing_file(self):
        self.assertRaises(SystemExit, compiler.load_file, os.path.join(self.tdir, 'nothing.dsd'))

    def test_syntax_error(self):
        self.write("<a b\n")
        self.assertRaises(SystemExit, compiler.load_file, self.infile)

    def test_circular(self):
        self.write("<l}[a] : [b]{m>\n")
        self.assertRaises(SystemExit, compiler.load_file, self.infile)

    def test_debug_raises(self):
        self.write("<l}[a] : [b]{m>\n")
        self.assertRaises(Exception, compiler.main, ["--debug", self.infile])
        self.assertTrue(utils.DEBUG)


def suite():
    return unittest.TestLoader().loadTestsFromTestCase(TestCompiler)
