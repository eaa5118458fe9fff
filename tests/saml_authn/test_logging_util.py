import logging

from saml2.samlp import AuthnRequest

import saml_authn.logging_util as lu


def test_get_request_id():
    assert lu.get_request_id(AuthnRequest(id="id-1234")) == "id-1234"


def test_get_request_id_unknown():
    assert lu.get_request_id(None) == "UNKNOWN"
    assert lu.get_request_id(AuthnRequest()) == "UNKNOWN"


def test_authn_logging(caplog):
    logger = logging.getLogger("test_authn_logging")
    logger.setLevel(logging.DEBUG)
    lu.authn_logging(logger, logging.INFO, "built", AuthnRequest(id="id-1234"))
    assert "[id-1234] built" in caplog.messages


def test_authn_logging_dict_message_without_request(caplog):
    logger = logging.getLogger("test_authn_logging_dict")
    logger.setLevel(logging.DEBUG)
    lu.authn_logging(logger, logging.DEBUG, {"message": "Built AuthnRequest"}, None)
    assert "[UNKNOWN] {'message': 'Built AuthnRequest'}" in caplog.messages
