import json
import logging
from collections.abc import Sequence
from pathlib import Path

import requests
from web3 import Web3
from web3.exceptions import BadFunctionCallOutput, ContractLogicError, Web3Exception

from balancerv3adapter.domain.token import Erc20Token
from balancerv3adapter.misc.info import (
    DEFAULT_TOKEN_DECIMALS,
    UNKNOWN_TOKEN_NAME,
    UNKNOWN_TOKEN_SYMBOL,
)
from balancerv3adapter.utils import format_units

logger = logging.getLogger(__name__)

CALL_EXCEPTIONS = (
    ValueError,
    TypeError,
    BadFunctionCallOutput,
    ContractLogicError,
    Web3Exception,
    requests.RequestException,
)


class Erc20Service:
    def __init__(self, web3: Web3, file_path: str = __file__):
        self.web3 = web3
        abi_path = Path(file_path).parent / 'ERC20.json'
        self.erc20_contract_abi = self.web3.eth.contract(abi=json.loads(abi_path.read_text()))

    def get_token_info(self, address: str) -> Erc20Token:
        """
        Reads ERC20 metadata of a token at the latest block.

        Every field is read separately; a failed or empty read is replaced with a
        placeholder so a broken token never fails the caller.
        """
        name = self._call(address, 'name')
        symbol = self._call(address, 'symbol')
        decimals = self._call(address, 'decimals')
        total_supply = self._call(address, 'totalSupply')

        if decimals is None:
            decimals = DEFAULT_TOKEN_DECIMALS
        return Erc20Token(
            address=address,
            name=name or UNKNOWN_TOKEN_NAME,
            symbol=symbol or UNKNOWN_TOKEN_SYMBOL,
            decimals=decimals,
            total_supply=format_units(total_supply, decimals) if total_supply else '0',
        )

    def get_token_infos(self, addresses: Sequence[str]) -> list[Erc20Token]:
        return [self.get_token_info(address) for address in addresses]

    def _call(self, address: str, function_name: str):
        try:
            contract_function = getattr(self.erc20_contract_abi.functions, function_name)
            return contract_function().call({'to': Web3.to_checksum_address(address)}, 'latest')
        except CALL_EXCEPTIONS as e:
            logger.warning(f'Failed to read {function_name}() of token {address}: {e}')
            return None
