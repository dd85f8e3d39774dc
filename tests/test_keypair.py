import copy
import logging
import pickle

import pytest

from eccblind import DOMAIN, InvalidPoint, InvalidScalar, KeyPair, RandomSourceError, Secret
from eccblind.crypto import encodeScalar

from conftest import ScriptedSource, TOY, failingSource

def test_generate():
	kp = KeyPair.generate()
	assert kp.public == DOMAIN.G.mul(kp.private._reveal())
	assert 1 <= kp.private._reveal() < DOMAIN.n
	assert isinstance(kp.private, Secret)

def test_generate_from_source():
	kp = KeyPair.generate(TOY, ScriptedSource([13]))
	assert kp.private._reveal() == 13
	assert kp.public == TOY.G.mul(13)

def test_generate_without_entropy():
	with pytest.raises(RandomSourceError):
		KeyPair.generate(randomSource = failingSource)

def test_wired_roundtrip(keypair, caplog):
	with caplog.at_level(logging.WARNING, logger = 'eccblind'):
		private = keypair.exportPrivate()
	assert 'private key exported' in caplog.text
	assert private.hex() not in caplog.text

	restored = KeyPair.fromWired(private, keypair.publicWired())
	assert restored.public == keypair.public
	assert restored.private._reveal() == keypair.private._reveal()

def test_from_wired_without_public(keypair):
	restored = KeyPair.fromWired(encodeScalar(keypair.private._reveal()))
	assert restored.public == keypair.public

def test_from_wired_mismatched_public(keypair):
	other = KeyPair.generate()
	with pytest.raises(InvalidPoint):
		KeyPair.fromWired(encodeScalar(keypair.private._reveal()), other.publicWired())

def test_from_wired_bad_private():
	with pytest.raises(InvalidScalar):
		KeyPair.fromWired(b'\x00' * 32)
	with pytest.raises(InvalidScalar):
		KeyPair.fromWired(DOMAIN.n.to_bytes(32, 'big'))

def test_private_is_not_copyable(keypair):
	with pytest.raises(TypeError):
		copy.copy(keypair)
	with pytest.raises(TypeError):
		copy.deepcopy(keypair)
	with pytest.raises(TypeError):
		pickle.dumps(keypair)
	with pytest.raises(TypeError):
		copy.copy(keypair.private)
	with pytest.raises(TypeError):
		pickle.dumps(keypair.private)

def test_repr_redacts_private(keypair):
	text = repr(keypair)
	assert 'redacted' in text
	assert str(keypair.private._reveal()) not in text

def test_wipe():
	kp = KeyPair.generate()
	kp.wipe()
	assert kp.private.wiped
	with pytest.raises(ValueError):
		kp.private._reveal()

def test_private_scalar_not_public(keypair, caplog):
	assert not hasattr(keypair.private, 'value')
	with caplog.at_level(logging.WARNING, logger = 'eccblind'):
		exported = keypair.exportPrivate()
	assert len(caplog.records) == 1
	assert int.from_bytes(exported, 'big') == keypair.private._reveal()
