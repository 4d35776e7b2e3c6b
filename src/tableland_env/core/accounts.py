"""Signing accounts configured for a network."""

from pathlib import Path

from eth_account import Account
from eth_account.signers.local import LocalAccount
from pydantic import SecretStr

from tableland_env.blockchain.endpoints import NetworkConnection


class SignerAccount:
    """Signing account loaded from a private key or a key file.

    Parameters
    ----------
    private_key : SecretStr, optional
        The private key as a SecretStr (from env var).
    private_key_file : str, optional
        Path to a file containing the private key.

    Raises
    ------
    ValueError
        If neither private_key nor private_key_file is provided, or the
        key is not a valid private key.
    FileNotFoundError
        If private_key_file does not exist.
    """

    def __init__(
        self,
        private_key: SecretStr | None = None,
        private_key_file: str | None = None,
    ):
        if private_key is not None:
            key = private_key.get_secret_value()
        elif private_key_file is not None:
            key_path = Path(private_key_file).expanduser()
            if not key_path.exists():
                raise FileNotFoundError(f"Private key file not found: {private_key_file}")
            key = key_path.read_text().strip()
        else:
            raise ValueError("Either private_key or private_key_file must be provided")

        try:
            self._account: LocalAccount = Account.from_key(key)
        except Exception as e:
            # Never echo the key itself
            raise ValueError(f"Invalid private key: {type(e).__name__}") from None

    def get_account(self) -> LocalAccount:
        return self._account

    @property
    def address(self) -> str:
        """The checksummed account address."""
        return self._account.address


def signer_addresses(connection: NetworkConnection) -> list[str]:
    """Derive the addresses of the accounts configured for a connection.

    Raises
    ------
    ValueError
        If a configured key is not a valid private key.
    """
    return [SignerAccount(private_key=key).address for key in connection.accounts]
