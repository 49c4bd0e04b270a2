"""Tokenize and highlight a contract in a few lines: zero config, zero deps."""

from solex import highlight, tokenize

source = """pragma solidity ^0.4.0;

contract Greeter {
    string greeting = "hello\\n";

    function greet() constant returns (string) {
        return greeting;
    }
}
"""

for token in tokenize(source):
    print(token)

print(highlight(source))
