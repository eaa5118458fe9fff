import pytest
from saml2 import BINDING_HTTP_POST
from saml2.config import SPConfig
from saml2.saml import NAMEID_FORMAT_PERSISTENT

from saml_authn.authn_request_params import AuthnRequestParams

SP_BASE = "https://sp.example.org"
IDP_SSO_URL = "https://idp.example.org/sso/redirect"


@pytest.fixture
def sp_conf():
    spconfig = {
        "entityid": "{}/metadata.xml".format(SP_BASE),
        "service": {
            "sp": {
                "endpoints": {
                    "assertion_consumer_service": [
                        ("%s/acs/post" % SP_BASE, BINDING_HTTP_POST)
                    ],
                },
                "allow_unsolicited": True,
                "name_id_format": [NAMEID_FORMAT_PERSISTENT]
            },
        },
    }

    return spconfig


@pytest.fixture
def sp_config(sp_conf):
    return SPConfig().load(sp_conf)


@pytest.fixture
def authn_config_dict(sp_conf):
    config = {
        "SP_CONFIG": sp_conf,
        "DESTINATION": IDP_SSO_URL,
        "LOGGING": {"version": 1, "disable_existing_loggers": False},
    }
    return config


@pytest.fixture
def full_params():
    return AuthnRequestParams(
        True,
        True,
        True,
        True,
        "jdoe",
        "urn:oasis:names:tc:SAML:2.0:bindings:HTTP-POST",
        False,
        "https://sp.example.org/acs",
    )
