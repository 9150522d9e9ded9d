"""
jsonmonkey Session
One interpreter instance: a parser, an evaluator and the global environment
they share for a sequence of programs.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from jsonmonkey.env import Environment
from jsonmonkey.evaluator import EvalOptions, Evaluator
from jsonmonkey.parser import JIRParser, ParseOptions
from jsonmonkey.types import Ident, Value

logger = logging.getLogger(__name__)


class Session:
    """
    Interpreter session with its own global environment.

    Bindings made by one program are visible to every later program run in the
    same session and to no other session.
    """

    def __init__(
        self,
        parse_options: Optional[ParseOptions] = None,
        eval_options: Optional[EvalOptions] = None,
    ):
        self._env = Environment()
        self._parser = JIRParser(options=parse_options)
        self._evaluator = Evaluator(self._env)
        self._eval_options = eval_options or EvalOptions()

    @property
    def env(self) -> Environment:
        return self._env

    @property
    def bindings(self) -> Dict[Ident, Value]:
        """Return a copy of the current bindings"""
        return self._env.bindings

    def run(self, program: str) -> Value:
        """
        Parse then evaluate one program.

        Args:
            program: JIR program as JSON text

        Returns:
            Result value

        Raises:
            ParseError: If the program does not parse; nothing is evaluated
            EvalError: If evaluation fails; binds that completed before the
                failure stay in effect
        """
        expr = self._parser.parse(program)
        value = self._evaluator.evaluate(expr, self._eval_options)
        logger.debug("Program evaluated to %s", value.kind)
        return value


def new_session(
    parse_options: Optional[ParseOptions] = None,
    eval_options: Optional[EvalOptions] = None,
) -> Session:
    """Create a session with an empty global environment"""
    return Session(parse_options, eval_options)
