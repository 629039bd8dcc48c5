# tests/conftest.py
# Put the project root (the folder that contains 'monkey' and 'tests') on sys.path
# so `import monkey` works without installing the package.

import sys
import pathlib

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)

if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)

from monkey.tokens import Token, TokenType  # noqa: E402


@pytest.fixture
def tok():
    """Build a hand-made token stream: tok(("INT", "5"), ...) -> [..., EOF]."""
    def _make(*pairs):
        out = [Token(TokenType[kind], literal) for kind, literal in pairs]
        out.append(Token(TokenType.EOF, ""))
        return out
    return _make
