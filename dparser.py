# Recursive descent parser for function text into AST.
#
# expression := pm_ops
# pm_ops     := md_ops (('+' | '-') md_ops)*
# md_ops     := power_ops (('*' | '/') power_ops)*
# power_ops  := operand ('^' operand)*           - left associative, 2^3^2 is (2^3)^2
# operand    := NUM | 'x' | FUNC operand | '(' expression ')'
#
# a ^ b is written as exp (b * ln (a)) so that only composition and product rules are needed for
# differentiation, this is only valid for a > 0 and is not checked.

import math

from dast import AST
from dlexer import Token, Tokenizer

_VAR      = 'x'

_FUNC2AST = {
	'exp': AST.ExpFunc,
	'ln' : AST.LnFunc,
	'sin': AST.SinFunc,
	'cos': AST.CosFunc,
	'tg' : AST ('/', AST.SinFunc, AST.CosFunc),
	'ctg': AST ('/', AST.CosFunc, AST.SinFunc),
}

class ParseError (SyntaxError):
	def __init__ (self, expected, found = None, msg = None): # found = offending token or None for end of input
		self.expected = expected
		self.found    = 'end of input' if found is None else repr (str (found))

		SyntaxError.__init__ (self, msg or f'expected {expected}, got {self.found}')

#...............................................................................................
class Parser:
	def __init__ (self, tokenizer):
		self.tokenizer = tokenizer

	def run (self):
		try:
			ast = self.expression ()
		except RecursionError:
			raise ParseError ('a less deeply nested expression', msg = 'expression too deeply nested') from None

		if not self.tokenizer.at_end ():
			raise ParseError ('end of input', self.tokenizer.peek ())

		return ast

	def expression (self):
		return self.pm_ops ()

	def pm_ops (self): # number with sign folded in by tokenizer is binary minus here, 'x-3' -> x - 3
		ast = self.md_ops ()

		while 1:
			tok = self.tokenizer.peek ()

			if tok is None:
				return ast

			if tok.kind == Token.NUM and math.copysign (1., tok.val) < 0:
				op = '-'

				self.tokenizer.replace (Token.Number (-tok.val))

			elif tok.kind in ('+', '-'):
				op = tok.kind

				self.tokenizer.take ()

			else:
				return ast

			ast = AST (op, ast, self.md_ops ())

	def md_ops (self):
		ast = self.power_ops ()

		while 1:
			tok = self.tokenizer.peek ()

			if tok is None or tok.kind not in ('*', '/'):
				return ast

			self.tokenizer.take ()

			ast = AST (tok.kind, ast, self.power_ops ())

	def power_ops (self):
		ast = self.operand ()

		while self.tokenizer.peek () == Token.Power:
			self.tokenizer.take ()

			ast = AST ('-comp', AST.ExpFunc, ('*', ('-comp', AST.LnFunc, ast), self.operand ()))

		return ast

	def operand (self):
		tok = self.tokenizer.peek ()

		if tok is None:
			raise ParseError ('an operand')

		kind = tok.kind

		if kind == Token.NUM:
			self.tokenizer.take ()

			return AST ('#', tok.val)

		elif kind == Token.ID:
			if tok.val != _VAR:
				raise ParseError ('an operand', tok, f"invalid identifier {tok.val!r}, use {_VAR!r} as the variable name")

			self.tokenizer.take ()

			return AST.Ident

		elif kind in _FUNC2AST:
			self.tokenizer.take ()

			return AST ('-comp', _FUNC2AST [kind], self.operand ())

		elif tok == Token.OpenParen:
			return self.paren_expr ()

		raise ParseError ('an operand', tok)

	def paren_expr (self):
		self.expect (Token.OpenParen)

		ast = self.expression ()

		self.expect (Token.CloseParen)

		return ast

	def expect (self, token):
		tok = self.tokenizer.peek ()

		if tok != token:
			raise ParseError (repr (str (token)), tok)

		return self.tokenizer.take ()

def parse (src, invalid = None): # src = text or text stream
	return Parser (Tokenizer (src, invalid)).run ()
