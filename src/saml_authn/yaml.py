"""
YAML loading for saml_authn configuration files.

Two tags are understood on top of plain YAML:

    !ENV NAME       the value of the environment variable NAME
    !ENVFILE NAME   the contents of the file whose path is in NAME
"""
import os

from yaml import SafeLoader as _safe_loader
from yaml import YAMLError
from yaml import safe_load as load

TAG_ENV = "!ENV"
TAG_ENVFILE = "!ENVFILE"


def _environ_value(loader, node):
    name = loader.construct_scalar(node)
    return name, os.environ.get(name)


def _constructor_env(loader, node):
    name, value = _environ_value(loader, node)
    if value is None:
        raise YAMLError("Environment variable '{}' is not set".format(name))
    return value


def _constructor_envfile(loader, node):
    name, path = _environ_value(loader, node)
    try:
        with open(path) as f:
            return f.read()
    except (TypeError, OSError) as e:
        msg = "Cannot read file '{path}' named by environment variable '{name}'".format(
            path=path, name=name
        )
        raise YAMLError(msg) from e


_safe_loader.add_constructor(TAG_ENV, _constructor_env)
_safe_loader.add_constructor(TAG_ENVFILE, _constructor_envfile)

__all__ = ["load", "YAMLError", "TAG_ENV", "TAG_ENVFILE"]
