import click

from ..authn_config import AuthnRequestConfig
from ..authn_request import AuthnRequestBuilder
from ..authn_request_params import AuthnRequestParams
from ..exception import SAMLAuthnError


def create_authn_request(config, params, destination=None):
    """
    Builds the AuthnRequest described by PARAMS for the SP in the given CONFIG.

    :type config: str | dict
    :type params: saml_authn.authn_request_params.AuthnRequestParams
    :type destination: str | None
    :rtype: (str, str)
    :return: tuple of (request id, AuthnRequest XML)
    """
    authn_config = AuthnRequestConfig(config)
    authn_config.setup_logging()
    builder = AuthnRequestBuilder(authn_config.sp_config(), authn_config.get("DESTINATION"))
    return builder.create_authn_request_xml(params, destination)


@click.command()
@click.argument("config")
@click.option("--force-authn", is_flag=True, type=click.BOOL, default=False,
              help="Ask the IdP to re-authenticate the user (ForceAuthn)")
@click.option("--passive", is_flag=True, type=click.BOOL, default=False,
              help="Forbid the IdP to interact with the user (IsPassive)")
@click.option("--name-id-policy/--no-name-id-policy", is_flag=True, type=click.BOOL, default=True,
              help="Include a NameIDPolicy element")
@click.option("--allow-create/--no-allow-create", is_flag=True, type=click.BOOL, default=True,
              help="Set AllowCreate on the NameIDPolicy element")
@click.option("--subject", type=click.STRING, default=None,
              help="NameID of the subject that should be authenticated")
@click.option("--protocol-binding", type=click.STRING, default=None,
              help="ProtocolBinding to request instead of the configured one")
@click.option("--omit-protocol-binding", is_flag=True, type=click.BOOL, default=False,
              help="Do not include a ProtocolBinding attribute")
@click.option("--acs-url", type=click.STRING, default=None,
              help="AssertionConsumerServiceURL to use instead of the configured one")
@click.option("--destination", type=click.STRING, default=None,
              help="IdP SSO location, overrides DESTINATION from the config")
def construct_authn_request(config, force_authn, passive, name_id_policy, allow_create, subject,
                            protocol_binding, omit_protocol_binding, acs_url, destination):
    """
    Print a SAML2 AuthnRequest for the SP described in CONFIG.
    """
    params = AuthnRequestParams(
        force_authn,
        passive,
        name_id_policy,
        allow_create,
        subject,
        protocol_binding,
        not omit_protocol_binding,
        acs_url,
    )
    try:
        _, xml = create_authn_request(config, params, destination)
    except SAMLAuthnError as err:
        raise click.ClickException(str(err)) from err
    click.echo(xml)
