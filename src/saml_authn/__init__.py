# -*- coding: utf-8 -*-
"""
    saml_authn
    ~~~~~~~~~~~~~~~~

    Input parameters and request building for the SAML2 AuthnRequests
    a Service Provider sends when starting Single Sign-On.

    :license: APACHE 2.0, see LICENSE for more details.
"""
from importlib.metadata import version as _resolve_package_version


def _parse_version():
    value = _resolve_package_version("saml-authn")
    return value


version = _parse_version()
