"""Contract-call operation builder."""
from __future__ import annotations

from stellar_sdk import Address, InvokeHostFunction, xdr


def build_invocation(
    contract_id: str, method: str, *args: xdr.SCVal
) -> InvokeHostFunction:
    """Build one ``InvokeHostFunction`` operation calling ``method`` on the contract.

    Arguments are passed positionally in the order given; arity and types are
    left for the simulation engine to check.
    """
    host_function = xdr.HostFunction(
        type=xdr.HostFunctionType.HOST_FUNCTION_TYPE_INVOKE_CONTRACT,
        invoke_contract=xdr.InvokeContractArgs(
            contract_address=Address(contract_id).to_xdr_sc_address(),
            function_name=xdr.SCSymbol(sc_symbol=method.encode("utf-8")),
            args=list(args),
        ),
    )
    return InvokeHostFunction(host_function=host_function, auth=[])
