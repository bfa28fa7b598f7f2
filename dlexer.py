# Tokenizer for function text, lazy, with one character and one token of lookahead.

import io

#...............................................................................................
class Token (tuple):
	NUM, ID = 'NUM', 'ID'

	FUNCS   = ('exp', 'ln', 'sin', 'cos', 'tg', 'ctg')
	SINGLES = ('(', ')', '+', '-', '*', '/', '^')

	def __new__ (cls, kind, val = None):
		return tuple.__new__ (cls, (kind,) if val is None else (kind, val))

	kind = property (lambda self: self [0])
	val  = property (lambda self: self [1] if len (self) > 1 else None)

	def __repr__ (self):
		return f'Token ({", ".join (repr (a) for a in self)})'

	def __str__ (self): # source text of token
		if self [0] == Token.NUM:
			return str (int (self [1])) if self [1].is_integer () and abs (self [1]) < 1e16 else repr (self [1])
		elif self [0] == Token.ID:
			return self [1]
		else:
			return self [0]

Token.Number     = staticmethod (lambda num: Token (Token.NUM, float (num)))
Token.Identifier = staticmethod (lambda name: Token (Token.ID, name))
Token.OpenParen  = Token ('(')
Token.CloseParen = Token (')')
Token.Plus       = Token ('+')
Token.Minus      = Token ('-')
Token.Mul        = Token ('*')
Token.Div        = Token ('/')
Token.Power      = Token ('^')
Token.Exp        = Token ('exp')
Token.Ln         = Token ('ln')
Token.Sin        = Token ('sin')
Token.Cos        = Token ('cos')
Token.Tan        = Token ('tg')
Token.Cotan      = Token ('ctg')

#...............................................................................................
class LexError (ValueError): # invalid token with no recovery policy in place
	def __init__ (self, text):
		ValueError.__init__ (self, f'invalid token {text!r}')

		self.text = text

class Ignore: # invalid token policy results, returned uninstantiated
	pass

class Fail:
	pass

class Substitute:
	__slots__ = ['token']

	def __init__ (self, token):
		self.token = token

def raise_invalid_token (text):
	raise LexError (text)

#...............................................................................................
class Tokenizer:
	def __init__ (self, src, invalid = None): # src = str or text stream, invalid = callable (text) -> Ignore | Substitute (token) | Fail
		if isinstance (src, str):
			src = io.StringIO (src)

		self.src     = src
		self.invalid = invalid or raise_invalid_token
		self.failed  = False
		self._tok    = None
		self._ch     = None

	def __iter__ (self):
		while 1:
			tok = self.take ()

			if tok is None:
				break

			yield tok

	def at_end (self):
		return self.failed or self.peek () is None

	def peek (self):
		if self._tok is None:
			self._tok = self._read_token ()

		return self._tok

	def take (self):
		tok       = self.peek ()
		self._tok = None

		return tok

	def replace (self, tok): # replace pending lookahead token
		self._tok = tok

	def _read_token (self):
		while not self.failed:
			self._skip_space ()

			ch = self._take_char ()

			if ch is None:
				return None

			if ch in Token.SINGLES:
				if ch != '-':
					return Token (ch)

				self._skip_space () # '-' followed by digit is sign of number, even across whitespace

				ch2 = self._peek_char ()

				if ch2 is None or not ch2.isdigit ():
					return Token.Minus

				tok, text = self._read_number ('-')

			elif ch.isdigit ():
				tok, text = self._read_number (ch)

			elif ch.isalpha () or ch == '_':
				return self._read_id (ch)

			else:
				tok, text = None, ch

			if tok is not None:
				return tok

			res = self.invalid (text)

			if res is Fail:
				self.failed = True

			elif isinstance (res, Substitute):
				return res.token

			elif res is not Ignore:
				raise TypeError (f'invalid token policy returned {res!r}')

		return None

	def _read_number (self, ch):
		s = [ch]

		while 1:
			ch = self._peek_char ()

			if ch is None or not (ch.isdigit () or ch in '.e'):
				break

			s.append (self._take_char ())

		text = ''.join (s)

		try:
			return Token.Number (float (text)), text
		except ValueError:
			return None, text

	def _read_id (self, ch):
		s = [ch]

		while 1:
			ch = self._peek_char ()

			if ch is None or not (ch.isalnum () or ch == '_'):
				break

			s.append (self._take_char ())

		name = ''.join (s)
		func = name.lower ()

		return Token (func) if func in Token.FUNCS else Token.Identifier (name)

	def _skip_space (self):
		while 1:
			ch = self._peek_char ()

			if ch is None or not ch.isspace ():
				break

			self._take_char ()

	def _peek_char (self):
		if self._ch is None:
			self._ch = self.src.read (1) or None

		return self._ch

	def _take_char (self):
		ch       = self._peek_char ()
		self._ch = None

		return ch

def tokenize (text, invalid = None):
	return list (Tokenizer (text, invalid))
