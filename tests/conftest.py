import pytest

from jsonmonkey.env import Environment
from jsonmonkey.evaluator import Evaluator
from jsonmonkey.parser import JIRParser
from jsonmonkey.session import new_session


@pytest.fixture
def session():
    return new_session()


@pytest.fixture
def env():
    return Environment()


@pytest.fixture
def evaluator(env):
    return Evaluator(env)


@pytest.fixture
def parser():
    return JIRParser()
