"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest

CONTRACT = """\
pragma solidity ^0.4.0;

contract Token{index} is Owned {{
    mapping (address => uint256) balances;
    uint256 public totalSupply = 1000 ether;

    event Transfer(address indexed from, address indexed to, uint256 value);

    function transfer(address to, uint256 value) public returns (bool) {{
        // Checks
        if (balances[msg.sender] < value) {{ throw; }}
        /* Effects */
        balances[msg.sender] -= value;
        balances[to] += value;
        Transfer(msg.sender, to, value);
        return true;
    }}

    function balanceOf(address owner) constant returns (uint256);
}}
"""


@pytest.fixture
def contract_corpus() -> list[str]:
    """Small contracts, one per entry."""
    return [CONTRACT.format(index=i) for i in range(200)]


@pytest.fixture
def large_contract() -> str:
    """One ~100KB source file."""
    return "\n".join(CONTRACT.format(index=i) for i in range(150))


@pytest.fixture
def adversarial_sources() -> list[str]:
    """Inputs that stress the signature look-ahead and comment scanning."""
    return [
        "function f(" + "(" * 20_000 + ") {",
        "a " * 20_000 + "f(x);",
        "/*" * 20_000,
        "#if 0\n" + "#ifdef X\n" * 5_000,
        '"' + "\\x" * 20_000,
    ]
