#!/usr/bin/env python
# python 3.6+

# Randomized CONSISTENCY testing of derivative vs. SymPy: text -> ast -> derivative -> sympy -> evaluate at x, compared
# against sympy -> diff -> evaluate at x of the same ast.

from getopt import getopt
from random import random, randint, choice, seed, uniform
import math
import sys
import unittest

import sympy as sp

from dparser import parse
from dsimp import simplify
from dsym import ast2spt
import dcalc

_X          = sp.Symbol ('x')
_POINTS     = (0.3, 2.5)  # sample range, positive so that x itself is valid as ln argument and power base
_NPOINTS    = 3
_RTOL       = 1e-6
_HUGE       = 1e6

_NUMS       = ('1', '2', '3', '0.5', '1.5', '4')
_EXPS       = ('2', '3', '0.5', '-1', '-2', '1.5')

#...............................................................................................
# positive valued expressions, safe as ln argument and power base

def pos_var ():
	return 'x'

def pos_num ():
	return choice (_NUMS)

def pos_exp ():
	return f'exp ({expr ()})'

def pos_add ():
	return f'({pos ()} + {pos ()})'

def pos_mul ():
	return f'({pos ()} * {pos ()})'

def pos_div ():
	return f'({pos ()} / {pos ()})'

def pos_pow ():
	return f'({pos ()}) ^ {choice (_EXPS)}'

# general expressions

def expr_pos ():
	return pos ()

def expr_add ():
	return f'({expr ()} + {expr ()})'

def expr_sub ():
	return f'({expr ()} - {expr ()})'

def expr_mul ():
	return f'({expr ()} * {expr ()})'

def expr_div ():
	return f'({expr ()} / {pos ()})'

def expr_sin ():
	return f'sin ({expr ()})'

def expr_cos ():
	return f'cos ({expr ()})'

def expr_tg ():
	return f'tg ({expr ()})'

def expr_ctg ():
	return f'ctg ({expr ()})'

def expr_ln ():
	return f'ln ({pos ()})'

def expr_pow ():
	return f'({pos ()}) ^ ({expr ()})'

#...............................................................................................
POSS  = [va [1] for va in filter (lambda va: va [0] [:4] == 'pos_', globals ().items ())]
EXPRS = [va [1] for va in filter (lambda va: va [0] [:5] == 'expr_', globals ().items ())]
DEPTH = 0

def term ():
	return 'x' if random () < 0.6 else choice (_NUMS)

def _gen (funcs):
	global DEPTH

	if DEPTH <= 0:
		return term ()

	DEPTH -= 1
	ret    = choice (funcs) ()
	DEPTH += 1

	return ret

def pos ():
	return _gen (POSS)

def expr (depth = None):
	global DEPTH

	if depth is not None:
		DEPTH = depth

	return _gen (EXPRS)

def evaluate (spt, xval): # sympy expression at x -> float or None if not real, finite and reasonably sized
	try:
		val = complex (spt.subs (_X, xval).evalf ())
	except (TypeError, ValueError, ZeroDivisionError, OverflowError):
		return None

	if not (math.isfinite (val.real) and math.isfinite (val.imag)) or abs (val.imag) > 1e-9 * max (1, abs (val.real)) or abs (val.real) > _HUGE:
		return None

	return val.real

#...............................................................................................
def check (argv = None): # returns (number of expressions, number of values compared)
	opts, _  = getopt (sys.argv [1:] if argv is None else argv, 'id:e:n:s:', ['inf', 'infinite', 'show', 'depth=', 'expr=', 'count=', 'seed='])

	depth    = 3
	count    = 100
	single   = None
	show     = ('--show', '') in opts
	infinite = ('-i', '') in opts or ('--inf', '') in opts or ('--infinite', '') in opts

	for opt, arg in opts:
		if opt in ('-d', '--depth'):
			depth = int (arg)
		elif opt in ('-e', '--expr'):
			single = arg
		elif opt in ('-n', '--count'):
			count = int (arg)
		elif opt in ('-s', '--seed'):
			seed (int (arg))

	nexprs   = 0
	nchecks  = 0
	status   = []

	try:
		while infinite or nexprs < (1 if single else count):
			nexprs += 1
			text    = single or expr (randint (1, depth))

			if show:
				print (text)

			status = [f'text: {text}']
			ast    = parse (text)
			status.extend (['', f'ast:  {ast}'])
			diff   = dcalc.derivative (ast)
			status.extend (['', f'diff: {diff}'])

			if simplify (diff) != diff:
				raise ValueError ("simplified derivative not at fixed point")

			ours   = ast2spt (diff)
			status.extend (['', f'ours: {ours}'])
			theirs = sp.diff (ast2spt (ast), _X)
			status.extend (['', f'spt:  {theirs}'])

			for _ in range (_NPOINTS):
				xval = uniform (*_POINTS)
				val1 = evaluate (ours, xval)
				val2 = evaluate (theirs, xval)

				if val1 is None or val2 is None:
					continue

				nchecks += 1

				if abs (val1 - val2) > _RTOL * max (1, abs (val2)):
					status.extend (['', f'x:    {xval}', f'val1: {val1}', f'val2: {val2}'])

					raise ValueError ("derivative does not match")

	except KeyboardInterrupt:
		pass

	except:
		print ('Exception!\n', file = sys.stderr)
		print ('\n'.join (status), file = sys.stderr)
		print (file = sys.stderr)

		raise

	return nexprs, nchecks

class TestSym (unittest.TestCase):
	def test_random (self):
		nexprs, nchecks = check (['-n', '100', '-d', '3', '-s', '0'])

		self.assertEqual (nexprs, 100)
		self.assertGreater (nchecks, 0)

	def test_single (self):
		self.assertEqual (check (['-e', 'sin (x^2) / (x + 1)', '-s', '1']), (1, 3))

if __name__ == '__main__':
	print (check ())
