"""
Log lines about one AuthnRequest carry its ID, so every message the builder
emits for a request can be found again with a single grep.
"""
LOG_FMT = "[{id}] {message}"
UNKNOWN_REQUEST_ID = "UNKNOWN"


def get_request_id(request):
    """
    :type request: saml2.samlp.AuthnRequest | None
    :rtype: str
    :return: the ID attribute of the request, or UNKNOWN_REQUEST_ID before one is assigned
    """
    return getattr(request, "id", None) or UNKNOWN_REQUEST_ID


def authn_logging(logger, level, message, request, **kwargs):
    """
    Log `message` prefixed with the ID of the AuthnRequest it is about.

    :type logger: logging.Logger
    :type level: int
    :type message: str | dict
    :type request: saml2.samlp.AuthnRequest | None

    :param kwargs: passed on to Logger.log, e.g. exc_info=True
    """
    logline = LOG_FMT.format(id=get_request_id(request), message=message)
    logger.log(level, logline, **kwargs)
