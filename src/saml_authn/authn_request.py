"""
Serialisation of AuthnRequestParams into SAML2 AuthnRequest messages.
"""
import logging
from urllib.parse import urlparse

from saml2 import VERSION
from saml2 import saml
from saml2 import samlp
from saml2.s_utils import sid
from saml2.time_util import instant

import saml_authn.logging_util as lu
from saml_authn.exception import SAMLAuthnConfigurationError
from saml_authn.exception import SAMLAuthnRequestError


logger = logging.getLogger(__name__)

XML_TRUE = "true"


def get_consumer_service(sp_config):
    """
    Return the first configured assertion consumer service of the SP.

    :type sp_config: saml2.config.SPConfig
    :rtype: (str | None, str | None)

    :param sp_config: The SP configuration
    :return: tuple of (url, binding); either may be None
    """
    endpoints = sp_config.getattr("endpoints", "sp") or {}
    services = endpoints.get("assertion_consumer_service") or []
    if not services:
        return None, None

    service = services[0]
    if isinstance(service, str):
        return service, None

    url, binding = service
    return url, binding


def get_name_id_format(sp_config):
    """
    :type sp_config: saml2.config.SPConfig
    :rtype: str
    :return: the NameID format the SP asks for, NAMEID_FORMAT_UNSPECIFIED if none is configured
    """
    name_id_format = sp_config.getattr("name_id_format", "sp")
    if isinstance(name_id_format, (list, tuple)):
        name_id_format = name_id_format[0] if name_id_format else None
    return name_id_format or saml.NAMEID_FORMAT_UNSPECIFIED


def is_absolute_http_url(url):
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


class AuthnRequestBuilder(object):
    """
    Builds <samlp:AuthnRequest> messages from AuthnRequestParams, using the SP
    configuration for every value the parameters leave open.
    """

    def __init__(self, sp_config, destination=None):
        """
        :type sp_config: saml2.config.SPConfig
        :type destination: str | None

        :param sp_config: The SP configuration supplying the fallback values
        :param destination: Default IdP SSO location, used as the Destination attribute
        """
        if not sp_config.entityid:
            raise SAMLAuthnConfigurationError("SP configuration has no entityid")

        self.sp_config = sp_config
        self.destination = destination

    def build(self, params, destination=None):
        """
        Create an AuthnRequest.

        :type params: saml_authn.authn_request_params.AuthnRequestParams
        :type destination: str | None
        :rtype: saml2.samlp.AuthnRequest

        :param params: The input parameters of the request
        :param destination: IdP SSO location, overrides the builder default
        :return: the AuthnRequest
        """
        request = samlp.AuthnRequest(
            id=sid(),
            version=VERSION,
            issue_instant=instant(),
            issuer=saml.Issuer(text=self.sp_config.entityid, format=saml.NAMEID_FORMAT_ENTITY),
        )

        destination = destination or self.destination
        if destination:
            request.destination = destination

        if params.force_authn:
            request.force_authn = XML_TRUE
        if params.is_passive:
            request.is_passive = XML_TRUE

        acs_url, acs_binding = get_consumer_service(self.sp_config)
        consumer_url = params.sp_consumer_url if params.sp_consumer_url is not None else acs_url
        if consumer_url is None:
            raise SAMLAuthnRequestError("No AssertionConsumerServiceURL configured or requested", request.id)
        if not is_absolute_http_url(consumer_url):
            msg = "AssertionConsumerServiceURL is not an absolute http(s) URL: {}".format(consumer_url)
            raise SAMLAuthnRequestError(msg, request.id)
        request.assertion_consumer_service_url = consumer_url

        if params.include_protocol_binding:
            protocol_binding = params.protocol_binding if params.protocol_binding is not None else acs_binding
            if protocol_binding is not None:
                request.protocol_binding = protocol_binding
        elif params.protocol_binding is not None:
            msg = "ProtocolBinding {} requested but omitted from the request".format(params.protocol_binding)
            lu.authn_logging(logger, logging.DEBUG, msg, request)

        name_id_format = get_name_id_format(self.sp_config)
        if params.name_id_value_req is not None:
            name_id = saml.NameID(format=name_id_format, text=params.name_id_value_req)
            request.subject = saml.Subject(name_id=name_id)

        if params.set_name_id_policy:
            name_id_policy = samlp.NameIDPolicy(format=name_id_format)
            if params.allow_create:
                name_id_policy.allow_create = XML_TRUE
            request.name_id_policy = name_id_policy

        msg = {
            "message": "Built AuthnRequest",
            "destination": request.destination,
            "params": params.to_dict(),
        }
        lu.authn_logging(logger, logging.DEBUG, msg, request)
        return request

    def create_authn_request_xml(self, params, destination=None):
        """
        Create an AuthnRequest and serialise it.

        :type params: saml_authn.authn_request_params.AuthnRequestParams
        :type destination: str | None
        :rtype: (str, str)

        :param params: The input parameters of the request
        :param destination: IdP SSO location, overrides the builder default
        :return: tuple of (request id, AuthnRequest XML)
        """
        request = self.build(params, destination)
        return request.id, request.to_string().decode("utf-8")
