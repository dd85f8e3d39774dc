from contextlib import contextmanager
from logging import getLogger, LoggerAdapter, NullHandler
from secrets import token_hex
from typing import Iterator, Optional

import time

from .config import settings

logger = getLogger('eccblind')
logger.addHandler(NullHandler())
logger.setLevel(settings.logLevel)

class CeremonyAdapter(LoggerAdapter):
	def process(self, msg, kwargs):
		return f"[{self.extra['kind']} {self.extra['ceremony']}] {msg}", kwargs

def ceremonyLogger(kind: str, parent: Optional[LoggerAdapter] = None) -> LoggerAdapter:
	if parent is not None:
		return parent
	return CeremonyAdapter(logger.getChild(kind), {'kind': kind, 'ceremony': token_hex(4)})

@contextmanager
def timed(logger: LoggerAdapter, ctx: str) -> Iterator[None]:
	logger.debug("START: {}".format(ctx))
	start = time.perf_counter()
	yield
	end = time.perf_counter()
	logger.debug("DONE:  {} (took {:.3f} seconds)".format(ctx, end - start))

def fingerprint(data: bytes) -> str:
	return data[:8].hex() + ('..' if len(data) > 8 else '')
