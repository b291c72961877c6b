"""
Contract bindings for BEP20, Ownable and the TokenManager system contract.

Reads return decoded values.  Writes sign and submit, then return the
transaction hash; the caller polls for the receipt.
"""

from __future__ import annotations

from typing import Any

from eth_utils import to_checksum_address

from ..errors import ChainError
from ..keys.signer import Signer
from .abi import BEP20_ABI, OWNABLE_ABI, TOKEN_MANAGER_ABI, TOKEN_MANAGER_ADDRESS
from .network import ChainContext
from .rpc import read_contract
from .tx import send_contract_tx

DEFAULT_RELAY_FEE = 10**16  # 0.01 BNB


class _Contract:
    abi: list[dict[str, Any]] = []

    def __init__(self, ctx: ChainContext, address: str) -> None:
        self.ctx = ctx
        self.address = to_checksum_address(address)

    def _call(self, function_name: str, *args: Any) -> Any:
        result = read_contract(
            self.ctx.rpc_url, self.address, function_name, list(args), abi=self.abi
        )
        if result is None:
            # eth_call against an address without code returns empty data.
            raise ChainError(
                f"no contract code at given address {self.address} ({function_name})"
            )
        return result

    def _transact(self, signer: Signer, function_name: str, *args: Any, value: int = 0) -> str:
        result = send_contract_tx(
            self.ctx,
            signer,
            self.address,
            function_name,
            list(args),
            abi=self.abi,
            value=value,
        )
        return result["tx_hash"]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.address})"


class Bep20(_Contract):
    abi = BEP20_ABI

    def total_supply(self) -> int:
        return self._call("totalSupply")

    def balance_of(self, owner: str) -> int:
        return self._call("balanceOf", to_checksum_address(owner))

    def approve(self, signer: Signer, spender: str, amount: int) -> str:
        return self._transact(signer, "approve", to_checksum_address(spender), amount)

    def transfer(self, signer: Signer, recipient: str, amount: int) -> str:
        return self._transact(signer, "transfer", to_checksum_address(recipient), amount)


class Ownable(_Contract):
    abi = OWNABLE_ABI

    def transfer_ownership(self, signer: Signer, new_owner: str) -> str:
        return self._transact(signer, "transferOwnership", to_checksum_address(new_owner))


class TokenManager(_Contract):
    abi = TOKEN_MANAGER_ABI

    def __init__(self, ctx: ChainContext, address: str = TOKEN_MANAGER_ADDRESS) -> None:
        super().__init__(ctx, address)

    def approve_bind(
        self,
        signer: Signer,
        contract_address: str,
        bep2_symbol: str,
        relay_fee: int = DEFAULT_RELAY_FEE,
    ) -> str:
        return self._transact(
            signer,
            "approveBind",
            to_checksum_address(contract_address),
            bep2_symbol,
            value=relay_fee,
        )

    def reject_bind(
        self,
        signer: Signer,
        contract_address: str,
        bep2_symbol: str,
        relay_fee: int = DEFAULT_RELAY_FEE,
    ) -> str:
        return self._transact(
            signer,
            "rejectBind",
            to_checksum_address(contract_address),
            bep2_symbol,
            value=relay_fee,
        )
