#!/usr/bin/env python3
# python 3.6+

# Derivative calculator, read function of x per line and write out its simplified derivative.

import getopt
import os
import sys

import sympy as sp

import dlexer
import dparser
import ddiff
import dsimp
import dsym

_VERSION     = '0.1.0'

_HELP        = f'usage: dcalc [options] [expression ...]' '''

  -h, --help      - Show help information
  -v, --version   - Show version string
  -d, --debug     - Dump intermediate trees to stderr
  -r, --raw       - Do not simplify, write out derivative exactly as differentiated
  -s, --sympy     - Also write out SymPy derivative of same expression for comparison
  -f, --fail      - Invalid tokens are errors instead of being reported and ignored
  -x, --var NAME  - Variable name to use when writing out results (default 'x')

With no expressions given reads one expression per line from stdin until end of input.
'''.lstrip ()

_DCALC_DEBUG = os.environ.get ('DCALC_DEBUG')

#...............................................................................................
def report_invalid_token (text):
	print (f'Invalid token: {text}', file = sys.stderr)

	return dlexer.Ignore

def derivative (ast, simplify = True, debug = False):
	if not simplify:
		diff = ddiff.differentiate (ast)

	else:
		ast  = dsimp.simplify (ast)
		diff = dsimp.simplify (ddiff.differentiate (ast))

	if debug:
		print ('ast:  ', ast, file = sys.stderr)
		print ('diff: ', diff, file = sys.stderr)
		print ('size: ', ast.size, '->', diff.size, file = sys.stderr)

	return diff

def sympy_derivative (ast, var = 'x'):
	x = sp.Symbol (var)

	return sp.simplify (sp.diff (dsym.ast2spt (ast, x), x))

def interpret (text, var = 'x', simplify = True, invalid = report_invalid_token): # text -> derivative text, raises ParseError or LexError
	return dsym.render (derivative (dparser.parse (text, invalid), simplify), var)

def run (lines, out = None, prompt = '', var = 'x', simplify = True, sympy = False, invalid = report_invalid_token, debug = False):
	out = out or sys.stdout

	for line in lines:
		if line.strip ():
			try:
				ast = dparser.parse (line, invalid)

				print (dsym.render (derivative (ast, simplify, debug), var), file = out)

				if sympy:
					print (f'sympy: {sympy_derivative (ast, var)}', file = out)

			except (dparser.ParseError, dlexer.LexError) as e:
				print (f'Error: {e}', file = out)
			except RecursionError: # parses but too deep to differentiate, simplify or render
				print ('Error: expression too deeply nested', file = out)

		if prompt:
			print (prompt, end = '', file = out, flush = True)

def main (argv = None):
	try:
		opts, args = getopt.getopt (sys.argv [1:] if argv is None else argv, 'hvdrsfx:', ['help', 'version', 'debug', 'raw', 'sympy', 'fail', 'var='])

	except getopt.GetoptError as e:
		print (f'dcalc: {e}\n\n{_HELP}', file = sys.stderr)
		sys.exit (2)

	if ('--help', '') in opts or ('-h', '') in opts:
		print (_HELP)
		sys.exit (0)

	if ('--version', '') in opts or ('-v', '') in opts:
		print (_VERSION)
		sys.exit (0)

	kw = {
		'debug'   : bool (_DCALC_DEBUG) or ('--debug', '') in opts or ('-d', '') in opts,
		'simplify': not (('--raw', '') in opts or ('-r', '') in opts),
		'sympy'   : ('--sympy', '') in opts or ('-s', '') in opts,
		'invalid' : dlexer.raise_invalid_token if ('--fail', '') in opts or ('-f', '') in opts else report_invalid_token,
	}

	for opt, arg in opts:
		if opt in ('-x', '--var'):
			kw ['var'] = arg

	if args:
		run (args, **kw)

	else:
		prompt = '> ' if sys.stdin.isatty () else ''

		if prompt:
			print (prompt, end = '', flush = True)

		try:
			run (sys.stdin, prompt = prompt, **kw)
		except KeyboardInterrupt:
			print ()

if __name__ == '__main__':
	main ()
