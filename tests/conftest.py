from typing import Iterable

import pytest

from eccblind import Curve, KeyPair

# y^2 = x^3 + 4x + 20 over F_29, G = (8, 10), 37 points
TOY = Curve(name = 'toy-29', p = 29, a = 4, b = 20, gx = 8, gy = 10, n = 37)

class ScriptedSource:
	"""Random source replaying fixed scalars, one per draw."""

	def __init__(self, values: Iterable[int]):
		self.values = list(values)
		self.draws = 0

	def __call__(self, nbytes: int) -> bytes:
		if self.draws >= len(self.values):
			raise OSError('scripted entropy exhausted')
		value = self.values[self.draws]
		self.draws += 1
		return value.to_bytes(nbytes, 'big')

def failingSource(nbytes: int) -> bytes:
	raise OSError('no entropy today')

def shortSource(nbytes: int) -> bytes:
	return b'\x01' * (nbytes - 1)

def constantHash(digest: bytes):
	return lambda message, pointEncoding: digest

@pytest.fixture
def toy() -> Curve:
	return TOY

@pytest.fixture(scope = 'session')
def keypair() -> KeyPair:
	return KeyPair.generate()

@pytest.fixture
def toyKeypair() -> KeyPair:
	return KeyPair.generate(TOY)
