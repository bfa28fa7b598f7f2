#!/usr/bin/env python3

import setuptools

setuptools.setup (
  name                          = "dcalc",
  version                       = "0.1.0",
  license                       = 'BSD',
  keywords                      = "Math derivative differentiation symbolic",
  description                   = "Symbolic derivative calculator for functions of a single variable",
  long_description              = "dcalc reads a function of x such as 'sin(x) * x^2', parses it into an expression tree, differentiates it structurally "
    "and simplifies the result by rewriting to a fixed point, writing it out in fully parenthesized form. "
    "SymPy is used to cross-check results.",
  long_description_content_type = "text/plain",
  py_modules                    = ['dast', 'dlexer', 'dparser', 'ddiff', 'dsimp', 'dsym', 'dcalc'],
  scripts                       = ['bin/dcalc'],
  classifiers                   = [
    'Intended Audience :: Education',
    'Intended Audience :: Science/Research',
    'License :: OSI Approved :: BSD License',
    'Operating System :: OS Independent',
    'Programming Language :: Python',
    'Programming Language :: Python :: 3',
    'Programming Language :: Python :: 3 :: Only',
    'Topic :: Scientific/Engineering',
    'Topic :: Scientific/Engineering :: Mathematics',
  ],
  install_requires              = ['sympy>=1.4'],
  python_requires               = '>=3.6',
)
