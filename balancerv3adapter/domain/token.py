from dataclasses import dataclass


@dataclass(slots=True)
class TokenInfo:
    address: str
    name: str
    symbol: str
    decimals: int


@dataclass(slots=True)
class Erc20Token:
    address: str
    name: str
    symbol: str
    decimals: int
    total_supply: str


@dataclass(slots=True)
class RegistryToken:
    """Token entry of the Balancer token registry, with its ERC4626 review flags."""

    address: str
    underlying_token_address: str | None = None
    use_underlying_for_add_remove: bool = False
    can_use_buffer_for_swaps: bool = False

    @property
    def resolves_to_underlying(self) -> bool:
        return bool(
            self.underlying_token_address
            and self.use_underlying_for_add_remove
            and self.can_use_buffer_for_swaps
        )
