#
# Python-ethkeyring -- Multi-algorithm BIP-39 Key Derivation and Signing Algorithm Registry
#
# Copyright (c) 2022, Dominion Research & Development Corp.
#
# Python-ethkeyring is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or (at your option) any later
# version.  It is also available under alternative (eg. Commercial) licenses, at
# your option.  See the LICENSE file at the top of the source tree.
#
# Python-ethkeyring is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for more details.
#
from __future__		import annotations

from typing		import Optional

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= (
    "KeyDerivationError", "InvalidMnemonic", "InvalidPath", "UnsupportedAlgorithm",
    "SeedExpansionFailed", "InvalidScalar", "AlgorithmMismatch", "InvalidPassphrase",
)


class KeyDerivationError( ValueError ):
    """Base of all key derivation failures.  None are transient; every operation is a pure function
    of its inputs, so a retry on the same input cannot succeed.

    """


class InvalidMnemonic( KeyDerivationError ):
    """The BIP-39 Mnemonic contains unrecognized words, or fails its checksum.  Carries only the
    number of words and the language; never the words themselves.

    """
    def __init__( self, message: str, words: Optional[int] = None, language: Optional[str] = None ):
        super().__init__( message )
        self.words		= words
        self.language		= language


class InvalidPassphrase( KeyDerivationError ):
    """A BIP-39 passphrase supplied as bytes that do not decode as UTF-8.  Carries nothing of the
    passphrase itself.

    """


class InvalidPath( KeyDerivationError ):
    def __init__( self, message: str, path: Optional[str] = None ):
        super().__init__( message )
        self.path		= path


class UnsupportedAlgorithm( KeyDerivationError ):
    def __init__( self, algo: str ):
        super().__init__( f"Unsupported signing algorithm: {algo}" )
        self.algo		= algo


class SeedExpansionFailed( KeyDerivationError ):
    def __init__( self, message: str, algo: Optional[str] = None ):
        super().__init__( message )
        self.algo		= algo


class InvalidScalar( KeyDerivationError ):
    def __init__( self, message: str, algo: Optional[str] = None ):
        super().__init__( message )
        self.algo		= algo


class AlgorithmMismatch( KeyDerivationError ):
    def __init__( self, expected: str, received: str ):
        super().__init__( f"Signing algorithm must be {expected}, got {received}" )
        self.expected		= expected
        self.received		= received
