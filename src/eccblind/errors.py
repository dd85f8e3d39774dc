class BlindSignatureError(Exception):
	pass

class RandomSourceError(BlindSignatureError):
	"""The entropy source failed or returned short output."""

class InvalidScalar(BlindSignatureError, ValueError):
	pass

class InvalidPoint(BlindSignatureError, ValueError):
	pass

class SessionReused(BlindSignatureError):
	"""A one-shot session or request was used after it was consumed."""

class WireDecodeError(BlindSignatureError, ValueError):
	pass
