class Secret:
	"""
	A secret scalar held in a mutable buffer so it can be overwritten once it
	is no longer needed. Copying and pickling are refused; use the owning
	object's explicit export operation instead.
	"""

	__slots__ = ('_buf',)

	def __init__(self, value: int, width: int):
		self._buf = bytearray(value.to_bytes(width, 'big'))

	# package-internal; the only public way out is KeyPair.exportPrivate()
	def _reveal(self) -> int:
		if self._buf is None:
			raise ValueError('secret has been wiped')
		return int.from_bytes(self._buf, 'big')

	@property
	def wiped(self) -> bool:
		return self._buf is None

	def wipe(self) -> None:
		buf = getattr(self, '_buf', None)
		if buf is None:
			return
		for idx in range(len(buf)):
			buf[idx] = 0
		self._buf = None

	def __enter__(self) -> 'Secret':
		return self

	def __exit__(self, *exc) -> None:
		self.wipe()

	def __del__(self):
		self.wipe()

	def __repr__(self):
		return 'Secret(<wiped>)' if self._buf is None else 'Secret(<redacted>)'

	def __copy__(self):
		raise TypeError('secrets cannot be copied')

	def __deepcopy__(self, memo):
		raise TypeError('secrets cannot be copied')

	def __reduce__(self):
		raise TypeError('secrets cannot be serialized')
