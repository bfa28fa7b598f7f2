# Simplification of AST by fixed rule set rewriting, repeated until tree stops changing.
#
# Each rule either folds constants or strictly shrinks the tree, except exp (f) * exp (g) -> exp (f + g)
# whose result no rule turns back into a product. A new rule which breaks this can make simplify ()
# loop forever.

import math

from dast import AST

def _is_const (ast, val):
	return ast.is_num and ast.num == val

def _is_ln_of (ast): # ('-comp', ('-ln',), f) -> f
	return ast.inner if ast.is_comp and ast.outer.is_ln else None

def _exp_arg (ast): # ('-comp', ('-exp',), f) -> f, bare ('-exp',) -> x
	if ast.is_exp:
		return AST.Ident

	return ast.inner if ast.is_comp and ast.outer.is_exp else None

#...............................................................................................
def _simplify_add (l, r):
	if l.is_num and r.is_num:
		return AST ('#', l.num + r.num)
	if _is_const (l, 0):
		return r
	if _is_const (r, 0):
		return l
	if r.is_add: # l + (m + n) -> (l + m) + n
		return AST ('+', ('+', l, r.lhs), r.rhs)
	if l == r:
		return AST ('*', AST.Two, l)

	return AST ('+', l, r)

def _simplify_sub (l, r):
	if l.is_num and r.is_num:
		return AST ('#', l.num - r.num)
	if _is_const (l, 0):
		return AST ('*', AST.NegOne, r)
	if _is_const (r, 0):
		return l

	return AST ('-', l, r)

def _simplify_mul (l, r):
	if l.is_num and r.is_num:
		return AST ('#', l.num * r.num)
	if _is_const (l, 1):
		return r
	if _is_const (r, 1):
		return l
	if _is_const (l, 0) or _is_const (r, 0):
		return AST.Zero

	if l.is_pow and r.is_pow:
		return AST ('^', l.exp + r.exp)

	if r.is_mul: # like powers where left or right side is itself a product
		if r.lhs.is_pow and r.rhs.is_pow:
			return AST ('*', ('^', r.lhs.exp + r.rhs.exp), l)

		if l.is_pow:
			if r.rhs.is_pow:
				return AST ('*', ('^', l.exp + r.rhs.exp), r.lhs)
			if r.lhs.is_pow:
				return AST ('*', ('^', l.exp + r.lhs.exp), r.rhs)

	if l.is_mul:
		if l.lhs.is_pow and l.rhs.is_pow:
			return AST ('*', ('^', l.lhs.exp + l.rhs.exp), r)

		if r.is_pow:
			if l.lhs.is_pow:
				return AST ('*', ('^', l.lhs.exp + r.exp), l.rhs)
			if l.rhs.is_pow:
				return AST ('*', ('^', l.rhs.exp + r.exp), l.lhs)

	f, g = _exp_arg (l), _exp_arg (r)

	if f is not None and g is not None: # exp (f) * exp (g) -> exp (f + g)
		return AST ('-comp', AST.ExpFunc, ('+', f, g))

	if r.is_mul: # f * (g * h) -> (f * g) * h
		return AST ('*', ('*', l, r.lhs), r.rhs)

	return AST ('*', l, r)

def _simplify_div (l, r):
	if l.is_num and r.is_num:
		return AST ('#', _fdiv (l.num, r.num))
	if _is_const (r, 1):
		return l

	return AST ('/', l, r)

def _fdiv (n, d): # IEEE float division, inf or nan instead of ZeroDivisionError
	try:
		return n / d

	except ZeroDivisionError:
		if not n or math.isnan (n):
			return math.nan

		return math.copysign (math.inf, n) * math.copysign (1., d)

def _simplify_comp (o, i):
	if o.is_pow and i.is_pow:
		return AST ('^', o.exp * i.exp)
	if i.is_identity: # f (x) -> f
		return o
	if o.is_identity: # x (f) -> f
		return i

	if o.is_exp:
		if i.is_ln:
			return AST.Ident

		f = _is_ln_of (i)

		if f is not None: # exp (ln (f)) -> f
			return f

		if i.is_mul: # exp (c * ln (f)) -> f^c
			for ln, c in ((i.lhs, i.rhs), (i.rhs, i.lhs)):
				if c.is_num:
					if ln.is_ln:
						return AST ('^', c.num)

					f = _is_ln_of (ln)

					if f is not None:
						return AST ('-comp', ('^', c.num), f)

	elif o.is_ln:
		if i.is_exp:
			return AST.Ident

		if i.is_comp and i.outer.is_exp: # ln (exp (f)) -> f
			return i.inner

	return AST ('-comp', o, i)

#...............................................................................................
_simplify_binops = {
	'+'    : _simplify_add,
	'-'    : _simplify_sub,
	'*'    : _simplify_mul,
	'/'    : _simplify_div,
	'-comp': _simplify_comp,
}

def simplify_step (ast):
	func = _simplify_binops.get (ast.op)

	if func:
		return func (simplify (ast [1]), simplify (ast [2]))

	if ast.is_pow and ast.exp == 0:
		return AST.One

	return ast

def simplify (ast):
	old = ast
	new = simplify_step (old)

	while new != old:
		old = new
		new = simplify_step (old)

	return new
