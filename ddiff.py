# Structural differentiation of AST, returns new tree, never fails.

from dast import AST

def _diff_comp (ast): # chain rule
	return AST ('*', ('-comp', differentiate (ast.outer), ast.inner), differentiate (ast.inner))

_diff_funcs = {
	'-exp' : lambda ast: AST.ExpFunc,
	'-ln'  : lambda ast: AST ('/', AST.One, AST.Ident),
	'-sin' : lambda ast: AST.CosFunc,
	'-cos' : lambda ast: AST ('*', AST.NegOne, AST.SinFunc),
	'#'    : lambda ast: AST.Zero,
	'^'    : lambda ast: AST ('*', ('#', ast.exp), ('^', ast.exp - 1)),
	'+'    : lambda ast: AST ('+', differentiate (ast.lhs), differentiate (ast.rhs)),
	'-'    : lambda ast: AST ('-', differentiate (ast.lhs), differentiate (ast.rhs)),
	'*'    : lambda ast: AST ('+', ('*', differentiate (ast.lhs), ast.rhs), ('*', ast.lhs, differentiate (ast.rhs))),
	'/'    : lambda ast: AST ('/', ('-', ('*', differentiate (ast.numer), ast.denom), ('*', ast.numer, differentiate (ast.denom))), ('-comp', ('^', 2), ast.denom)),
	'-comp': _diff_comp,
}

def differentiate (ast):
	return _diff_funcs [ast.op] (ast)
