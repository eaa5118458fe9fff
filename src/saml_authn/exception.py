"""
Exceptions for saml_authn
"""


class SAMLAuthnError(Exception):
    """
    Base saml_authn exception
    """
    pass


class SAMLAuthnConfigurationError(SAMLAuthnError):
    """
    saml_authn configuration error
    """
    pass


class SAMLAuthnRequestError(SAMLAuthnError):
    """
    Raised by the request builder when an AuthnRequest cannot be constructed
    from the given parameters and SP configuration.
    """

    def __init__(self, message, request_id=None, *args, **kwargs):
        """
        :type message: str
        :type request_id: str | None

        :param message: A text message
        :param request_id: ID of the AuthnRequest that was being built, if any
        """
        super().__init__(message, *args, **kwargs)
        self.request_id = request_id
