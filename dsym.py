# Write out AST as native text and convert AST to SymPy expressions.
#
# Both work by substitution: a node is rendered given the already rendered argument it is applied
# to, composition renders the inner node first and passes the result on as the argument of the outer.

import sympy as sp

from dast import AST

_SYMPY_FUNCS = {'-exp': sp.exp, '-ln': sp.log, '-sin': sp.sin, '-cos': sp.cos}

def _fltoint (num): # integral floats up to where they print exactly as int
	return int (num) if num.is_integer () and abs (num) < 1e16 else num

def _num2nat (num):
	if num != num or num in (float ('inf'), float ('-inf')):
		return repr (num)

	return str (_fltoint (num))

#...............................................................................................
class ast2nat: # abstract syntax tree -> native text
	def __new__ (cls, ast, arg = 'x'):
		self = super ().__new__ (cls)

		return self._ast2nat (ast, arg)

	def _ast2nat (self, ast, arg):
		return self._ast2nat_funcs [ast.op] (self, ast, arg)

	def _ast2nat_func (self, ast, arg):
		return f'{ast.func}({arg})'

	def _ast2nat_num (self, ast, arg):
		return _num2nat (ast.num)

	def _ast2nat_pow (self, ast, arg):
		return f'({arg}^{_num2nat (ast.exp)})'

	def _ast2nat_binop (self, ast, arg):
		return f'({self._ast2nat (ast [1], arg)} {ast.op} {self._ast2nat (ast [2], arg)})'

	def _ast2nat_comp (self, ast, arg):
		return self._ast2nat (ast.outer, self._ast2nat (ast.inner, arg))

	_ast2nat_funcs = {
		'-exp' : _ast2nat_func,
		'-ln'  : _ast2nat_func,
		'-sin' : _ast2nat_func,
		'-cos' : _ast2nat_func,
		'#'    : _ast2nat_num,
		'^'    : _ast2nat_pow,
		'+'    : _ast2nat_binop,
		'-'    : _ast2nat_binop,
		'*'    : _ast2nat_binop,
		'/'    : _ast2nat_binop,
		'-comp': _ast2nat_comp,
	}

#...............................................................................................
class ast2spt: # abstract syntax tree -> sympy tree (expression)
	def __new__ (cls, ast, var = 'x'):
		self = super ().__new__ (cls)

		return self._ast2spt (ast, sp.Symbol (var) if isinstance (var, str) else var)

	def _ast2spt (self, ast, arg):
		return self._ast2spt_funcs [ast.op] (self, ast, arg)

	def _ast2spt_func (self, ast, arg):
		return _SYMPY_FUNCS [ast.op] (arg)

	def _ast2spt_num (self, ast, arg):
		return sp.sympify (_fltoint (ast.num))

	def _ast2spt_pow (self, ast, arg):
		return sp.Pow (arg, sp.sympify (_fltoint (ast.exp)))

	def _ast2spt_comp (self, ast, arg):
		return self._ast2spt (ast.outer, self._ast2spt (ast.inner, arg))

	_ast2spt_funcs = {
		'-exp' : _ast2spt_func,
		'-ln'  : _ast2spt_func,
		'-sin' : _ast2spt_func,
		'-cos' : _ast2spt_func,
		'#'    : _ast2spt_num,
		'^'    : _ast2spt_pow,
		'+'    : lambda self, ast, arg: sp.Add (self._ast2spt (ast.lhs, arg), self._ast2spt (ast.rhs, arg)),
		'-'    : lambda self, ast, arg: sp.Add (self._ast2spt (ast.lhs, arg), -self._ast2spt (ast.rhs, arg)),
		'*'    : lambda self, ast, arg: sp.Mul (self._ast2spt (ast.lhs, arg), self._ast2spt (ast.rhs, arg)),
		'/'    : lambda self, ast, arg: sp.Mul (self._ast2spt (ast.numer, arg), sp.Pow (self._ast2spt (ast.denom, arg), -1)),
		'-comp': _ast2spt_comp,
	}

def render (ast, var = 'x'):
	return ast2nat (ast, var)
