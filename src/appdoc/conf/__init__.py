''' Module level configuration.

    Each module owns a section named after it in the INI files listed by
    `APPDOC_CONFIG_FILE`. Only UPPERCASE names of the module defaults are
    configurable, and a value read from file takes the type of its default.
'''
import configparser
import json
import os
import re

from typing import Any, Callable, Dict

from . import sysdefaults


def env(name: str, defval: Any, coercer: Callable[[Any], Any] = None):
    value = os.environ.get(name, defval)
    return coercer(value) if callable(coercer) else value


APPDOC_CONFIG_FILES = env("APPDOC_CONFIG_FILE", "base.ini|config.ini").split('|')
RX_INVALID_OPTION = re.compile(r"[^A-Za-z\d_]+")


def option_name(option: str) -> str:
    ''' `support-email`, `Support Email` and `SUPPORT_EMAIL` all name the same key. '''
    return RX_INVALID_OPTION.sub("_", option.strip()).upper()


def __module_config__():
    parser = configparser.ConfigParser()
    parser.optionxform = option_name
    registry: Dict[str, "ModuleConfig"] = {}

    def read_typed(section, key, default):
        # bool is a subclass of int, it must be checked first
        if isinstance(default, bool):
            return parser.getboolean(section, key)
        if isinstance(default, int):
            return parser.getint(section, key)
        if isinstance(default, float):
            return parser.getfloat(section, key)
        if isinstance(default, (dict, list, tuple)):
            return json.loads(parser.get(section, key))
        if isinstance(default, (str, type(None))):
            return parser.get(section, key)

        raise ValueError(f"Unsupported config value type [{type(default)}] for [{section}] {key}.")

    class ModuleConfig(object):
        def __init__(self, module_name: str, *defaults):
            if module_name in registry:
                raise RuntimeError(f"Module [{module_name}] already configured.")

            values: Dict[str, Any] = {}
            for source in defaults + (sysdefaults,):
                for key, default in vars(source).items():
                    if not key.isupper() or key in values:
                        continue

                    if parser.has_option(module_name, key):
                        values[key] = read_typed(module_name, key, default)
                    else:
                        values[key] = default

            self.__name__ = module_name
            self.__values__ = values

        def __getattr__(self, name):
            try:
                return self.__values__[name]
            except KeyError:
                raise AttributeError(f"[{self.__name__}] has no config value {name}")

        def __getitem__(self, name):
            return self.__values__[name]

        def get(self, name, default=None):
            return self.__values__.get(name, default)

        def as_dict(self):
            return self.__values__.copy()

    def get_config(module_name: str, *defaults) -> ModuleConfig:
        if module_name not in registry:
            registry[module_name] = ModuleConfig(module_name, *defaults)

        return registry[module_name]

    def read_file(fp) -> None:
        ''' Load extra INI content. Only modules configured afterwards see it. '''
        parser.read_file(fp)

    # Missing files are skipped
    parser.read(APPDOC_CONFIG_FILES)
    return ModuleConfig, get_config, read_file


ModuleConfig, getConfig, read_config_file = __module_config__()
default_config = getConfig("appdoc.sysdefaults", sysdefaults)
