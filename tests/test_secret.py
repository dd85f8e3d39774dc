import pytest

from eccblind import Secret

def test_value_and_wipe():
	secret = Secret(0x1234, 4)
	buf = secret._buf
	assert secret._reveal() == 0x1234
	secret.wipe()
	assert secret.wiped
	assert buf == bytearray(4)
	secret.wipe()

def test_context_manager_wipes():
	with Secret(42, 1) as secret:
		assert secret._reveal() == 42
	assert secret.wiped
	assert repr(secret) == 'Secret(<wiped>)'

def test_wiped_value_raises():
	secret = Secret(1, 1)
	secret.wipe()
	with pytest.raises(ValueError):
		secret._reveal()
