"""
Wallet - pairs a signer with the LCD client it signs for.
"""
import logging
from typing import Any, Optional, Protocol, Sequence

from .client import LCDClient


class Signer(Protocol):
    """Protocol for transaction signers (key management lives outside this package)"""
    address: str

    def sign_tx(
        self,
        msgs: Sequence[Any],
        *,
        chain_id: str,
        account_number: int,
        sequence: int
    ) -> bytes:
        """Sign msgs and return the serialized transaction bytes"""
        ...


class Wallet:
    """
    A signer bound to an LCD client and chain.

    Missing account number / sequence are looked up on the node before
    the messages are handed to the signer.
    """

    def __init__(
        self,
        lcd: LCDClient,
        signer: Signer,
        chain_id: str,
        logger: Optional[logging.Logger] = None
    ):
        if not signer:
            raise ValueError("signer must be provided")
        if not chain_id:
            raise ValueError("chain_id must be provided")

        self.lcd = lcd
        self.signer = signer
        self.chain_id = chain_id
        self.logger = logger or logging.getLogger(__name__)

    @property
    def address(self) -> str:
        return self.signer.address

    def create_and_sign_tx(
        self,
        msgs: Sequence[Any],
        account_number: Optional[int] = None,
        sequence: Optional[int] = None
    ) -> bytes:
        """
        Sign msgs with the wallet's signer

        Args:
            msgs: Messages to include in the transaction
            account_number: Account number override
            sequence: Sequence override

        Returns:
            Serialized signed transaction

        Raises:
            ValueError: If msgs is empty
        """
        if not msgs:
            raise ValueError("msgs must not be empty")

        if account_number is None or sequence is None:
            account = self.lcd.account_info(self.address)
            if account_number is None:
                account_number = account.account_number
            if sequence is None:
                sequence = account.sequence

        self.logger.debug(
            f"Signing {len(msgs)} msg(s) for {self.address} "
            f"(account_number={account_number}, sequence={sequence})"
        )
        return self.signer.sign_tx(
            msgs,
            chain_id=self.chain_id,
            account_number=account_number,
            sequence=sequence
        )
