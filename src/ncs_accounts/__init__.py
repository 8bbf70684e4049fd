"""Parse /etc/passwd and, when privileged, /etc/shadow into account records."""

from ncs_accounts.config import RegistryConfig, load_config
from ncs_accounts.errors import AccountsError, NotFoundError, ParseError, ReadError
from ncs_accounts.identity import IdentityContext, ProcessIdentity, StaticIdentity
from ncs_accounts.models import AccountRecord, CredentialRecord
from ncs_accounts.parsing import find_credential, parse_account_line, parse_credential_line
from ncs_accounts.registry import AccountRegistry, current, get_all, lookup, lookup_by_id, read_registry

__all__ = [
    "AccountRecord",
    "AccountRegistry",
    "AccountsError",
    "CredentialRecord",
    "IdentityContext",
    "NotFoundError",
    "ParseError",
    "ProcessIdentity",
    "ReadError",
    "RegistryConfig",
    "StaticIdentity",
    "current",
    "find_credential",
    "get_all",
    "load_config",
    "lookup",
    "lookup_by_id",
    "parse_account_line",
    "parse_credential_line",
    "read_registry",
]
