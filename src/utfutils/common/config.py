'''Global configuration system supporting JSON5 files and command-line overrides'''

import json5
import logging
import argparse
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class Config:
    '''Global configuration singleton'''

    _instance = None
    _initialized = False

    # Default configuration values
    _defaults = {
        'endian': 'little',
    }

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self._config = self._defaults.copy()
            self._cli_overrides = {}
            self._initialized = True

    def load_file(self, filepath: str | Path) -> bool:
        '''Load configuration from JSON5 file'''
        filepath = Path(filepath)
        if not filepath.exists():
            return False

        try:
            with open(filepath, 'r', encoding = 'utf-8') as f:
                data = json5.loads(f.read())

        except (OSError, ValueError) as e:
            logger.warning('Failed to load config from %s: %s', filepath, e)
            return False

        if not isinstance(data, dict):
            logger.warning('Ignoring config %s: top level is not an object', filepath)
            return False

        self._config.update(data)
        return True

    def load_defaults(self):
        '''Load the configuration file shipped with the package'''
        package_config = Path(__file__).parent.parent / 'config.json5'
        self.load_file(package_config)

    def reset(self):
        '''Drop file values, runtime values and overrides'''
        self._config = self._defaults.copy()
        self._cli_overrides = {}

    def parse_args(self, args: list[str] | None = None):
        '''Parse command-line arguments and override config'''
        parser = argparse.ArgumentParser(
            description = 'utfutils configuration',
            add_help = False
        )

        parser.add_argument(
            '--config',
            type = str,
            help = 'Path to config file'
        )

        parser.add_argument(
            '--endian',
            type = str,
            choices = ['little', 'big'],
            help = 'Byte order (little/big) used when packing code units'
        )

        # Parse known args, ignore unknown
        parsed, _ = parser.parse_known_args(args)

        # Load config file if specified
        if parsed.config:
            self.load_file(parsed.config)

        # Apply command-line overrides
        if parsed.endian:
            self._cli_overrides['endian'] = parsed.endian

    def get(self, key: str, default: Any = None) -> Any:
        '''Get configuration value'''
        # CLI overrides have highest priority
        if key in self._cli_overrides:
            return self._cli_overrides[key]

        # Then config file values
        if key in self._config:
            return self._config[key]

        # Finally default value
        return default

    def set(self, key: str, value: Any):
        '''Set configuration value at runtime'''
        self._config[key] = value

    @property
    def endian(self) -> str:
        '''Get byte order configuration'''
        return self.get('endian')


# Global config instance
_config = Config()


def get_config() -> Config:
    '''Get global config instance'''
    return _config


def default_endian() -> str:
    '''Get default byte order (little/big)'''
    return _config.endian


def init_config(args: list[str] | None = None):
    '''Initialize configuration system'''
    _config.load_defaults()
    if args is not None:
        _config.parse_args(args)


# Auto-load defaults on import
_config.load_defaults()
