"""Per-batch auxiliary data fetched by the driver before reconciling."""

from nftindexer.domain.events import Coordinate


class BatchLookups:
    """Coordinates, token URIs and ENS subdomains, keyed the way the reconciler asks for them."""

    def __init__(
        self,
        coordinates: dict[int, Coordinate] | None = None,
        token_uris: dict[str, str] | None = None,
        ens_subdomains: dict[int, str] | None = None,
    ) -> None:
        self._coordinates: dict[int, Coordinate] = dict(coordinates or {})
        self._token_uris: dict[str, str] = dict(token_uris or {})
        self._ens_subdomains: dict[int, str] = dict(ens_subdomains or {})

    @staticmethod
    def token_uri_key(contract_address: str, token_id: int) -> str:
        return f"{contract_address}-{token_id}"

    def coordinate(self, token_id: int) -> Coordinate | None:
        return self._coordinates.get(token_id)

    def token_uri(self, contract_address: str, token_id: int) -> str | None:
        return self._token_uris.get(self.token_uri_key(contract_address, token_id))

    def ens_subdomain(self, token_id: int) -> str | None:
        return self._ens_subdomains.get(token_id)
