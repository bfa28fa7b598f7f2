# Base classes for abstract differentiable function tree, tuple based.
#
# Every node is a function of a single implicit variable, its argument is supplied by the position
# of the node in the tree (the inner of a composition or the variable itself at top level).
#
# ('-exp',)                 - exp applied to argument
# ('-ln',)                  - natural logarithm applied to argument
# ('-sin',)                 - sine applied to argument
# ('-cos',)                 - cosine applied to argument
# ('#', num)                - constant function, num is always a float
# ('^', exp)                - argument raised to constant float power exp(onent), ('^', 1.0) is the identity
# ('+', lhs, rhs)           - sum of two functions
# ('-', lhs, rhs)           - difference of two functions
# ('*', lhs, rhs)           - product of two functions
# ('/', numer, denom)       - quotient numer(ator) / denom(inator)
# ('-comp', outer, inner)   - composition, outer applied to result of inner

#...............................................................................................
class AST (tuple):
	op      = None

	_OP2CLS = {}
	_CLS2OP = {}

	def __new__ (cls, *args):
		op       = AST._CLS2OP.get (cls)
		cls_args = tuple (AST (*arg) if arg.__class__ is tuple else arg for arg in args)

		if op:
			args = (op,) + cls_args

		elif args:
			args = cls_args

			cls2 = AST._OP2CLS.get (args [0])

			if cls2:
				cls      = cls2
				cls_args = cls_args [1:]

		if cls is not AST and '__new__' in cls.__dict__:
			self = cls.__new__ (cls, *cls_args)

		else:
			self = tuple.__new__ (cls, args)

			if self.op:
				self._init (*cls_args)

		return self

	def __getattr__ (self, name): # calculate value for nonexistent self.name by calling self._name () and store
		func                 = getattr (self, f'_{name}') if name [0] != '_' else None
		val                  = func and func ()
		self.__dict__ [name] = val

		return val

	def _init (self):
		pass

	def _size (self): # number of nodes in tree
		return 1 + sum (a.size for a in self [1:] if isinstance (a, AST))

	def _is_identity (self):
		return self.is_pow and self.exp == 1

	@staticmethod
	def register_AST (cls):
		AST._CLS2OP [cls]    = cls.op
		AST._OP2CLS [cls.op] = cls

#...............................................................................................
class AST_Exp (AST):
	op, is_exp, func = '-exp', True, 'exp'

class AST_Ln (AST):
	op, is_ln, func = '-ln', True, 'ln'

class AST_Sin (AST):
	op, is_sin, func = '-sin', True, 'sin'

class AST_Cos (AST):
	op, is_cos, func = '-cos', True, 'cos'

class AST_Num (AST):
	op, is_num = '#', True

	def __new__ (cls, num):
		self     = tuple.__new__ (cls, ('#', float (num)))
		self.num = self [1]

		return self

class AST_Pow (AST):
	op, is_pow = '^', True

	def __new__ (cls, exp):
		self     = tuple.__new__ (cls, ('^', float (exp)))
		self.exp = self [1]

		return self

class AST_Add (AST):
	op, is_add = '+', True

	def _init (self, lhs, rhs):
		self.lhs, self.rhs = lhs, rhs

class AST_Sub (AST):
	op, is_sub = '-', True

	def _init (self, lhs, rhs):
		self.lhs, self.rhs = lhs, rhs

class AST_Mul (AST):
	op, is_mul = '*', True

	def _init (self, lhs, rhs):
		self.lhs, self.rhs = lhs, rhs

class AST_Div (AST):
	op, is_div = '/', True

	def _init (self, numer, denom):
		self.numer, self.denom = numer, denom

	lhs = property (lambda self: self.numer)
	rhs = property (lambda self: self.denom)

class AST_Comp (AST):
	op, is_comp = '-comp', True

	def _init (self, outer, inner):
		self.outer, self.inner = outer, inner

#...............................................................................................
_AST_CLASSES = [AST_Exp, AST_Ln, AST_Sin, AST_Cos, AST_Num, AST_Pow, AST_Add, AST_Sub, AST_Mul, AST_Div, AST_Comp]

for _cls in _AST_CLASSES:
	AST.register_AST (_cls)

AST.Zero     = AST ('#', 0)
AST.One      = AST ('#', 1)
AST.Two      = AST ('#', 2)
AST.NegOne   = AST ('#', -1)
AST.Ident    = AST ('^', 1)
AST.ExpFunc  = AST ('-exp',)
AST.LnFunc   = AST ('-ln',)
AST.SinFunc  = AST ('-sin',)
AST.CosFunc  = AST ('-cos',)
