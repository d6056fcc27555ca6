"""Pure conversion between SEP-40 values and Soroban ``SCVal`` — no I/O."""
from __future__ import annotations

from stellar_sdk import scval, xdr

from ..models import Asset, AssetType, OtherAsset, PriceData, StellarAsset

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1

_INT_DECODERS = {
    xdr.SCValType.SCV_U32: scval.from_uint32,
    xdr.SCValType.SCV_I32: scval.from_int32,
    xdr.SCValType.SCV_U64: scval.from_uint64,
    xdr.SCValType.SCV_I64: scval.from_int64,
    xdr.SCValType.SCV_U128: scval.from_uint128,
    xdr.SCValType.SCV_I128: scval.from_int128,
    xdr.SCValType.SCV_U256: scval.from_uint256,
    xdr.SCValType.SCV_I256: scval.from_int256,
}


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def encode_asset(asset: Asset) -> xdr.SCVal:
    """Encode an asset as the contract's ``[tag, payload]`` vector.

    Examples:
        OtherAsset("BTC")  → vec[sym("Other"), sym("BTC")]
        StellarAsset("C…") → vec[sym("Stellar"), address("C…")]
    """
    if isinstance(asset, StellarAsset):
        payload = scval.to_address(asset.address)
    elif isinstance(asset, OtherAsset):
        payload = scval.to_symbol(asset.code)
    else:
        raise TypeError(f"Unsupported asset: {asset!r}")
    return scval.to_vec([scval.to_symbol(asset.type.value), payload])


def encode_u32(value: int) -> xdr.SCVal:
    if not 0 <= value <= U32_MAX:
        raise ValueError(f"{value} is outside the u32 range")
    return scval.to_uint32(value)


def encode_u64(value: int) -> xdr.SCVal:
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"{value} is outside the u64 range")
    return scval.to_uint64(value)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def is_void(value: xdr.SCVal) -> bool:
    return value.type == xdr.SCValType.SCV_VOID


def decode_int(value: xdr.SCVal) -> int:
    """Decode any Soroban integer type into a Python int."""
    decoder = _INT_DECODERS.get(value.type)
    if decoder is None:
        raise ValueError(f"Expected an integer value, got {value.type}")
    return decoder(value)


def decode_u32(value: xdr.SCVal) -> int:
    return scval.from_uint32(value)


def decode_asset(value: xdr.SCVal) -> Asset:
    """Reverse of :func:`encode_asset`."""
    items = scval.from_vec(value)
    if len(items) != 2:
        raise ValueError(f"Asset vector must have 2 elements, got {len(items)}")

    tag = AssetType(scval.from_symbol(items[0]))
    payload = items[1]
    if tag is AssetType.STELLAR:
        return StellarAsset(scval.from_address(payload).address)
    # Some contracts report the code as a string rather than a symbol.
    if payload.type == xdr.SCValType.SCV_STRING:
        code = scval.from_string(payload)
        return OtherAsset(code.decode() if isinstance(code, bytes) else code)
    return OtherAsset(scval.from_symbol(payload))


def decode_assets(value: xdr.SCVal) -> list[Asset]:
    return [decode_asset(item) for item in scval.from_vec(value)]


def decode_price_data(value: xdr.SCVal) -> PriceData | None:
    """Decode an ``Option<PriceData>``; ``None`` when the contract has no record."""
    if is_void(value):
        return None
    if value.type != xdr.SCValType.SCV_MAP or value.map is None:
        raise ValueError(f"Expected a PriceData map, got {value.type}")

    fields = {
        scval.from_symbol(entry.key): entry.val for entry in value.map.sc_map
    }
    try:
        return PriceData(
            price=decode_int(fields["price"]),
            timestamp=decode_int(fields["timestamp"]),
        )
    except KeyError as e:
        raise ValueError(f"PriceData is missing field {e}") from e


def decode_price_data_list(value: xdr.SCVal) -> list[PriceData] | None:
    """Decode an ``Option<Vec<PriceData>>``."""
    if is_void(value):
        return None
    records: list[PriceData] = []
    for item in scval.from_vec(value):
        record = decode_price_data(item)
        if record is None:
            raise ValueError("Unexpected void entry in PriceData vector")
        records.append(record)
    return records
