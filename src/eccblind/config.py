from dataclasses import dataclass
from os import environ as osEnviron
from typing import Mapping, Optional

LOG_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG', 'NOTSET')

@dataclass(frozen = True)
class Settings:
	hashName: str = 'sha512'
	logLevel: str = 'WARNING'

	@classmethod
	def fromEnv(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
		env = osEnviron if environ is None else environ
		hashName = env.get('ECCBLIND_HASH', cls.hashName).strip().lower()
		logLevel = env.get('ECCBLIND_LOG_LEVEL', cls.logLevel).strip().upper()
		if logLevel not in LOG_LEVELS:
			raise ValueError(f'ECCBLIND_LOG_LEVEL must be one of {", ".join(LOG_LEVELS)}, got {logLevel!r}')

		return cls(hashName = hashName, logLevel = logLevel)

settings = Settings.fromEnv()
