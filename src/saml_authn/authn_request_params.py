"""Input parameters for a SAML2 authentication request."""
from __future__ import annotations

from typing import Any, Mapping, Optional, TypeVar

TParams = TypeVar("TParams", bound="AuthnRequestParams")

FIELD_NAMES = (
    "force_authn",
    "is_passive",
    "set_name_id_policy",
    "allow_create",
    "name_id_value_req",
    "protocol_binding",
    "include_protocol_binding",
    "sp_consumer_url",
)


class AuthnRequestParams:
    """
    Immutable set of input parameters for one AuthnRequest.

    The request builder reads these values when it serialises a
    <samlp:AuthnRequest>. Optional values are None when the caller said
    nothing, in which case the builder falls back to the SP configuration.
    Nothing is validated here; every combination is recorded verbatim.

    The positional order of the constructor arguments is fixed:

        (force_authn, is_passive, set_name_id_policy, allow_create,
         name_id_value_req, protocol_binding, include_protocol_binding,
         sp_consumer_url)

    Subclasses may override any of the read-only properties. Copies made
    with `_copy_params_from` or `_copy_of` go through the properties, so
    such overrides are carried over into the copy.
    """

    __slots__ = tuple("_" + name for name in FIELD_NAMES)

    def __init__(
        self,
        force_authn: bool,
        is_passive: bool,
        set_name_id_policy: bool,
        allow_create: bool = True,
        name_id_value_req: Optional[str] = None,
        protocol_binding: Optional[str] = None,
        include_protocol_binding: bool = True,
        sp_consumer_url: Optional[str] = None,
    ):
        """
        Create a set of authentication request input parameters.

        :param force_authn: whether the ForceAuthn attribute should be set to true
        :param is_passive: whether the IsPassive attribute should be set to true
        :param set_name_id_policy: whether a NameIDPolicy element should be set
        :param allow_create: whether AllowCreate should be set to true on the
            NameIDPolicy element; only meaningful if set_name_id_policy is true
        :param name_id_value_req: the subject that should be authenticated
        :param protocol_binding: ProtocolBinding of the request; None means the
            value from the SP configuration is used
        :param include_protocol_binding: whether the ProtocolBinding attribute
            should be included at all
        :param sp_consumer_url: AssertionConsumerServiceURL of the request; None
            means the value from the SP configuration is used
        """
        self._record(
            force_authn,
            is_passive,
            set_name_id_policy,
            allow_create,
            name_id_value_req,
            protocol_binding,
            include_protocol_binding,
            sp_consumer_url,
        )

    @classmethod
    def with_defaults(cls: type[TParams], force_authn: bool, is_passive: bool,
                      set_name_id_policy: bool) -> TParams:
        return cls(force_authn, is_passive, set_name_id_policy)

    @classmethod
    def with_allow_create(cls: type[TParams], force_authn: bool, is_passive: bool,
                          set_name_id_policy: bool, allow_create: bool) -> TParams:
        return cls(force_authn, is_passive, set_name_id_policy, allow_create)

    @classmethod
    def with_name_id_subject(cls: type[TParams], force_authn: bool, is_passive: bool,
                             set_name_id_policy: bool, name_id_value_req: Optional[str]) -> TParams:
        """
        Parameters asking the IdP to authenticate a given subject. AllowCreate
        keeps its default of true.
        """
        return cls(force_authn, is_passive, set_name_id_policy, name_id_value_req=name_id_value_req)

    @classmethod
    def full(
        cls: type[TParams],
        force_authn: bool,
        is_passive: bool,
        set_name_id_policy: bool,
        allow_create: bool,
        name_id_value_req: Optional[str],
        protocol_binding: Optional[str],
        include_protocol_binding: bool,
        sp_consumer_url: Optional[str],
    ) -> TParams:
        return cls(
            force_authn,
            is_passive,
            set_name_id_policy,
            allow_create,
            name_id_value_req,
            protocol_binding,
            include_protocol_binding,
            sp_consumer_url,
        )

    def _copy_params_from(self, source: AuthnRequestParams) -> None:
        """
        Initialise this instance with the values of another set of parameters.
        Meant to be called from the initialiser of a subclass.

        Every value is read through the public properties of `source`.

        :param source: the source set of authentication request input parameters
        """
        self._record(
            source.force_authn,
            source.is_passive,
            source.set_name_id_policy,
            source.allow_create,
            source.name_id_value_req,
            source.protocol_binding,
            source.include_protocol_binding,
            source.sp_consumer_url,
        )

    @classmethod
    def _copy_of(cls: type[TParams], source: AuthnRequestParams) -> TParams:
        params = cls.__new__(cls)
        params._copy_params_from(source)
        return params

    def _record(self, *values: Any) -> None:
        if hasattr(self, "_force_authn"):
            raise AttributeError("'{type}' object is immutable".format(type=type(self).__name__))
        for name, value in zip(FIELD_NAMES, values):
            object.__setattr__(self, "_" + name, value)

    def __setattr__(self, key, value):
        raise AttributeError("'{type}' object is immutable".format(type=type(self).__name__))

    def __delattr__(self, key):
        raise AttributeError("'{type}' object is immutable".format(type=type(self).__name__))

    @property
    def force_authn(self) -> bool:
        """whether the ForceAuthn attribute should be set to true"""
        return self._force_authn

    @property
    def is_passive(self) -> bool:
        """whether the IsPassive attribute should be set to true"""
        return self._is_passive

    @property
    def set_name_id_policy(self) -> bool:
        """whether a NameIDPolicy element should be set"""
        return self._set_name_id_policy

    @property
    def allow_create(self) -> bool:
        """
        whether AllowCreate should be set to true on the NameIDPolicy element
        (only meaningful if set_name_id_policy is also true)
        """
        return self._allow_create

    @property
    def name_id_value_req(self) -> Optional[str]:
        """the subject that should be authenticated"""
        return self._name_id_value_req

    @property
    def protocol_binding(self) -> Optional[str]:
        """the ProtocolBinding value, may be None"""
        return self._protocol_binding

    @property
    def include_protocol_binding(self) -> bool:
        """whether the ProtocolBinding attribute should be included at all"""
        return self._include_protocol_binding

    @property
    def sp_consumer_url(self) -> Optional[str]:
        """the AssertionConsumerServiceURL to request, None for the configured one"""
        return self._sp_consumer_url

    def _values(self) -> tuple:
        return tuple(getattr(self, name) for name in FIELD_NAMES)

    def __eq__(self, other):
        if not isinstance(other, AuthnRequestParams):
            return NotImplemented
        return self._values() == other._values()

    def __hash__(self):
        return hash(self._values())

    def __repr__(self):
        fields = ", ".join(
            "{name}={value!r}".format(name=name, value=value)
            for name, value in zip(FIELD_NAMES, self._values())
        )
        return "{type}({fields})".format(type=type(self).__name__, fields=fields)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def to_dict(self) -> dict[str, Any]:
        """
        Converts the parameters to a dict
        :return: A dict representation of the parameters
        """
        return dict(zip(FIELD_NAMES, self._values()))

    @classmethod
    def from_dict(cls: type[TParams], data: Mapping[str, Any]) -> TParams:
        """
        :param data: A dict representation of the parameters; missing optional
            keys take the constructor defaults
        :return: An AuthnRequestParams
        """
        return cls(**data)
