"""
LCDClient - REST client for the LCD API of an Initia/minitia node.
"""
import base64
import json
import logging
import urllib.parse
from typing import Dict, Any, Optional, Sequence

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .models import TxInfo, BroadcastResult, MoveResource, AccountInfo
from .exceptions import LCDError, LCDConnectionError, LCDResponseError

# gRPC status code returned by the gateway when a tx hash is unknown
GRPC_NOT_FOUND = 5


class LCDClient:
    """
    Client for the LCD (REST) API of a node.

    This client handles:
    1. Broadcasting signed transactions
    2. Looking up transactions by hash
    3. Move view functions and resource queries
    4. Account lookups for signing
    """

    def __init__(
        self,
        url: str,
        timeout: int = 30,
        retry_count: int = 3,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the LCDClient

        Args:
            url: LCD endpoint URL (e.g., "https://lcd.initiation-1.initia.xyz")
            timeout: Timeout for HTTP requests in seconds
            retry_count: Number of retries for idempotent (GET) requests
            logger: Optional logger instance to use for debug/info logging

        Raises:
            ValueError: If the URL doesn't use https (unless it's localhost/127.0.0.1)
        """
        parsed = urllib.parse.urlparse(url)
        host = parsed.netloc.split(':')[0]
        is_local = host in ('localhost', '127.0.0.1')
        if parsed.scheme != 'https' and not is_local:
            raise ValueError(f"url must use https:// for security (got: {parsed.scheme}://)")

        self.url = url.rstrip('/')
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)

        # Broadcasts are POSTs and must never be replayed by the adapter
        self.session = requests.Session()
        retries = Retry(
            total=retry_count,
            backoff_factor=0.5,
            status_forcelist=[500, 502, 503, 504],
            allowed_methods=["GET"],
            raise_on_status=False,
            connect=retry_count,
            read=retry_count,
            other=retry_count
        )
        self.session.mount("http://", HTTPAdapter(max_retries=retries))
        self.session.mount("https://", HTTPAdapter(max_retries=retries))

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Send a request to the node and decode the JSON response

        Raises:
            LCDConnectionError: If the node cannot be reached
            LCDResponseError: If the node answers with a non-2xx status
            LCDError: If the response body is not valid JSON
        """
        url = f"{self.url}{path}"
        self.logger.debug(f"{method} {url}")
        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=body,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            self.logger.error(f"LCD request failed: {e}")
            raise LCDConnectionError(f"LCD request failed: {str(e)}") from e

        try:
            result = response.json()
        except ValueError as e:
            if response.ok:
                raise LCDError(f"Invalid JSON response from LCD: {str(e)}") from e
            result = {}

        if not response.ok:
            if not isinstance(result, dict):
                result = {}
            message = result.get("message") or response.reason or "unknown error"
            raise LCDResponseError(
                f"LCD returned {response.status_code}: {message}",
                status_code=response.status_code,
                code=result.get("code")
            )
        if not isinstance(result, dict):
            raise LCDError(f"Unexpected response shape from LCD: {type(result).__name__}")
        return result

    def tx_info(self, tx_hash: str) -> Optional[TxInfo]:
        """
        Look up a transaction by hash

        Args:
            tx_hash: Transaction hash (hex)

        Returns:
            TxInfo, or None if the node has not indexed the transaction yet
        """
        try:
            result = self._request("GET", f"/cosmos/tx/v1beta1/txs/{tx_hash}")
        except LCDResponseError as e:
            if e.status_code == 404 or e.code == GRPC_NOT_FOUND:
                return None
            raise

        tx_response = result.get("tx_response")
        if not tx_response:
            return None
        return TxInfo.model_validate(tx_response)

    def broadcast(self, tx_bytes: bytes, mode: str = "BROADCAST_MODE_SYNC") -> BroadcastResult:
        """
        Broadcast a signed transaction

        Args:
            tx_bytes: Serialized signed transaction
            mode: Cosmos broadcast mode

        Returns:
            BroadcastResult; a non-zero code means the node rejected the tx
        """
        result = self._request(
            "POST",
            "/cosmos/tx/v1beta1/txs",
            body={
                "tx_bytes": base64.b64encode(tx_bytes).decode("ascii"),
                "mode": mode,
            }
        )
        if "tx_response" not in result:
            raise LCDError(f"Missing tx_response in broadcast response: {result}")
        return BroadcastResult.model_validate(result["tx_response"])

    def view_function(
        self,
        address: str,
        module_name: str,
        function_name: str,
        type_args: Sequence[str] = (),
        args: Sequence[str] = ()
    ) -> Any:
        """
        Call a Move view function

        Args:
            address: Module address
            module_name: Module name
            function_name: View function name
            type_args: Type arguments
            args: Base64 BCS-encoded arguments

        Returns:
            The decoded JSON value returned by the function
        """
        result = self._request(
            "POST",
            f"/initia/move/v1/accounts/{address}/modules/{module_name}/view_functions/{function_name}",
            body={"type_args": list(type_args), "args": list(args)}
        )
        if "data" not in result:
            raise LCDError(f"Missing data in view function response: {result}")
        try:
            return json.loads(result["data"])
        except (TypeError, ValueError) as e:
            raise LCDError(f"Invalid view function data: {str(e)}") from e

    def resource(self, address: str, struct_tag: str) -> MoveResource:
        """
        Read a Move resource stored under an account

        Args:
            address: Account address
            struct_tag: Resource type tag

        Returns:
            MoveResource with the decoded resource data
        """
        result = self._request(
            "GET",
            f"/initia/move/v1/accounts/{address}/resources/by_struct_tag",
            params={"struct_tag": struct_tag}
        )
        resource = result.get("resource") or {}
        try:
            move_resource = json.loads(resource["move_resource"])
        except (KeyError, TypeError, ValueError) as e:
            raise LCDError(f"Invalid resource response: {result}") from e
        return MoveResource.model_validate(move_resource)

    def account_info(self, address: str) -> AccountInfo:
        """
        Fetch the account number and sequence of an account

        Args:
            address: Bech32 account address

        Returns:
            AccountInfo
        """
        result = self._request("GET", f"/cosmos/auth/v1beta1/accounts/{address}")
        account: Dict[str, Any] = result.get("account") or {}
        if not isinstance(account, dict):
            raise LCDError(f"Invalid account response: {result}")
        # Vesting and module accounts nest the base account
        base: Dict[str, Any] = account.get("base_account") or account
        return AccountInfo(
            address=base.get("address", address),
            account_number=int(base.get("account_number", 0)),
            sequence=int(base.get("sequence", 0))
        )
