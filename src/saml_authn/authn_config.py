"""
This module contains methods to load and verify the configuration used when building AuthnRequests.
"""
import copy
import logging
import logging.config
import os
import os.path

from saml2.config import SPConfig

from saml_authn.exception import SAMLAuthnConfigurationError
from saml_authn.yaml import load as yaml_load
from saml_authn.yaml import YAMLError


logger = logging.getLogger(__name__)

DEFAULT_LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "[%(asctime)s] [%(levelname)s] [%(name)s.%(funcName)s] %(message)s"
        }
    },
    "handlers": {
        "stdout": {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
            "level": "DEBUG",
            "formatter": "simple",
        }
    },
    "loggers": {"saml_authn": {"level": "INFO"}},
    "root": {"level": "WARNING", "handlers": ["stdout"]},
}


class AuthnRequestConfig(object):
    """
    Configuration for building AuthnRequests. Verifies that the given config holds all the
    necessary parameters.

    Example (YAML):

        SP_CONFIG:
          entityid: https://sp.example.org/metadata.xml
          service:
            sp:
              endpoints:
                assertion_consumer_service:
                  - [https://sp.example.org/acs/post, "urn:oasis:names:tc:SAML:2.0:bindings:HTTP-POST"]
              name_id_format:
                - urn:oasis:names:tc:SAML:2.0:nameid-format:persistent
        DESTINATION: https://idp.example.org/sso
    """
    environment_dict_keys = ["DESTINATION"]
    mandatory_dict_keys = ["SP_CONFIG"]

    def __init__(self, config):
        """
        Reads a given config and builds the AuthnRequestConfig.

        :type config: str | dict
        :rtype: saml_authn.authn_config.AuthnRequestConfig

        :param config: Can be a file path or a dictionary
        :return: A verified AuthnRequestConfig
        """
        parsers = [self._load_dict, self._load_yaml]
        for parser in parsers:
            self._config = parser(config)
            if self._config is not None:
                break

        self._verify_dict(self._config)

        for key in AuthnRequestConfig.environment_dict_keys:
            val = os.environ.get("SAML_AUTHN_{key}".format(key=key))
            if val:
                self._config[key] = val

        sp_config = self._config["SP_CONFIG"]
        for parser in parsers:
            _sp_config = parser(sp_config)
            if _sp_config is not None:
                self._config["SP_CONFIG"] = _sp_config
                break
        else:
            raise SAMLAuthnConfigurationError("Could not load SP configuration from 'SP_CONFIG'")

    def _verify_dict(self, conf):
        """
        Check that the configuration contains all necessary keys.

        :type conf: dict
        :rtype: None
        :raise SAMLAuthnConfigurationError: if the configuration is incorrect

        :param conf: config to verify
        :return: None
        """
        if not conf or not isinstance(conf, dict):
            raise SAMLAuthnConfigurationError("Missing configuration or unknown format")

        for key in AuthnRequestConfig.mandatory_dict_keys:
            if key not in conf:
                raise SAMLAuthnConfigurationError("Missing key '%s' in config" % key)

    def sp_config(self):
        """
        :rtype: saml2.config.SPConfig
        :return: the pysaml2 SP configuration described by 'SP_CONFIG'
        """
        try:
            return SPConfig().load(copy.deepcopy(self._config["SP_CONFIG"]))
        except Exception as err:
            logger.debug("Failed to load SP configuration", exc_info=True)
            raise SAMLAuthnConfigurationError("Invalid SP configuration: {}".format(err)) from err

    def setup_logging(self):
        logging.config.dictConfig(self._config.get("LOGGING", DEFAULT_LOGGING_CONFIG))

    def __getitem__(self, item):
        return self._config[item]

    def __contains__(self, key):
        return key in self._config

    def get(self, item, default=None):
        return self._config.get(item, default)

    def _load_dict(self, config):
        """
        Load config from dict

        :type config: dict
        :rtype: dict

        :param config: config to load
        :return: Loaded config
        """
        if isinstance(config, dict):
            return config

        return None

    def _load_yaml(self, config_file):
        """
        Load config from yaml file

        :type config_file: str
        :rtype: dict

        :param config_file: path of the yaml file to load
        :return: Loaded config
        """
        if not isinstance(config_file, str):
            return None

        try:
            with open(os.path.abspath(config_file)) as f:
                return yaml_load(f.read())
        except YAMLError as exc:
            logger.error("Could not parse config as YAML: {}".format(exc))
            if hasattr(exc, 'problem_mark'):
                mark = exc.problem_mark
                logger.error("Error position: ({line}:{column})".format(line=mark.line + 1, column=mark.column + 1))
        except IOError as e:
            logger.error("Could not open config file: {}".format(e))

        return None
