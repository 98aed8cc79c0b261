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

import logging
import secrets

from typing		import Optional, Union

from mnemonic		import Mnemonic			# Requires passphrase as str

from .defaults		import BITS, BITS_DEFAULT, LANGUAGE_DEFAULT
from .errors		import InvalidMnemonic, InvalidPassphrase
from .util		import commas

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= ( "generate_seed", "produce_mnemonic", "mnemonic_language", "RANDOM_BYTES" )

log				= logging.getLogger( __package__ )

# Monkey-patch this one place for testing, or to improve the entropy source
RANDOM_BYTES			= secrets.token_bytes


def mnemonic_language(
    mnemonic: str,
) -> Optional[str]:
    """Find the BIP-39 language in which the (normalized) Mnemonic Phrase passes its check bits, preferring
    the default language.  Resolves phrases whose words appear in more than one wordlist (eg. "abandon" is
    both english and french), where the words alone cannot determine the language.  None if no language
    validates.

    """
    languages			= Mnemonic.list_languages()
    if LANGUAGE_DEFAULT in languages:
        languages		= [ LANGUAGE_DEFAULT ] + [ lang for lang in languages if lang != LANGUAGE_DEFAULT ]
    for language in languages:
        m			= Mnemonic( language )
        if m.check( m.expand( mnemonic ) ):
            return language
    return None


def generate_seed(
    mnemonic: str,
    passphrase: Optional[Union[str,bytes]] = None,
    language: Optional[str]	= None,   # If desired, provide language (eg. if only prefixes are provided)
) -> bytes:
    """Generate the 512-bit BIP-39 seed from a single BIP-39 Mnemonic Phrase and an optional UTF-8
    string or encoded passphrase (empty, if None).

    Normalizes and validates the BIP-39 Mnemonic Phrase (which is often supplied as user input):
    - Removes excess whitespace and down-cases
    - Detects language if not provided (an ambiguous language is decided by the check bits)
    - Expands unambiguous mnemonic prefixes (eg. 'ae' --> 'aerobic', 'acti' --> 'action')
    - Checks that the BIP-39 Phrase check bits are valid

    Any failure raises InvalidMnemonic (or InvalidPassphrase, for bytes that aren't UTF-8) before the
    (expensive) PBKDF2 seed stretching begins.

    """
    if passphrase is None:
        passphrase		= ""

    # Polish up the supplied mnemonic, by eliminating extra spaces, leading/trailing newline(s); Mnemonic is fragile...
    mnemonic_stripped		= ' '.join( w.lower() for w in mnemonic.split() )
    if mnemonic_stripped != mnemonic:
        log.info( "BIP-39 Mnemonic Phrase stripped of unnecessary whitespace" )
    words			= len( mnemonic_stripped.split() )
    if not words:
        raise InvalidMnemonic( "BIP-39 Mnemonic Phrase is empty", words=words, language=language )
    if not language:
        try:
            language		= Mnemonic.detect_language( mnemonic_stripped )
        except Exception as exc:
            # Unrecognized, or ambiguous (eg. words in both english and french); the checksum decides
            language		= mnemonic_language( mnemonic_stripped )
            if not language:
                raise InvalidMnemonic(
                    f"BIP-39 Mnemonic language unrecognized, or check fails, in {words} words", words=words
                ) from exc
            log.info( f"BIP-39 Language resolved by check bits: {language}" )
        else:
            log.info( f"BIP-39 Language detected: {language}" )
    m				= Mnemonic( language )
    mnemonic_expanded		= m.expand( mnemonic_stripped )
    if mnemonic_expanded != mnemonic_stripped:
        log.info( "BIP-39 Mnemonic Phrase prefixes expanded" )
    if not m.check( mnemonic_expanded ):
        unrecognized		= sum( 1 for w in mnemonic_expanded.split() if w not in m.wordlist )
        raise InvalidMnemonic(
            f"BIP-39 Mnemonic check fails; {words} {m.language} words"
            + ( f", {unrecognized} unrecognized" if unrecognized else "; invalid checksum" ),
            words=words, language=m.language,
        )

    # python-mnemonic's Mnemonic requires passphrase as str (not bytes)
    try:
        passphrase_bip39	= passphrase if isinstance( passphrase, str ) else passphrase.decode( 'UTF-8' )
    except UnicodeDecodeError as exc:
        raise InvalidPassphrase( f"BIP-39 passphrase of {len( passphrase )} bytes is not UTF-8: {exc.reason}" ) from exc
    # Only a fully validated BIP-39 Mnemonic Phrase must ever be used here!  No checking is done
    # by Mnemonic.to_seed of either the Mnemonic Phrase or passphrase (except UTF-8 encoding).
    seed			= Mnemonic.to_seed( mnemonic_expanded, passphrase=passphrase_bip39 )
    log.info( f"Generated {len(seed)*8}-bit BIP-39 seed from {words}-word {m.language} mnemonic{' (and passphrase)' if passphrase_bip39 else ''}" )
    return bytes( seed )  # bytearray --> bytes


def produce_mnemonic(
    entropy: Optional[bytes]	= None,
    strength: Optional[int]	= None,
    language: Optional[str]	= None,
) -> str:
    """Produce a BIP-39 Mnemonic from the provided entropy (or generated, default 128 bits)."""
    if not entropy:
        if not strength:
            strength		= BITS_DEFAULT
        if strength not in BITS:
            raise ValueError( f"BIP-39 entropy must be {commas( BITS, final='or' )} bits, not {strength}" )
        entropy			= RANDOM_BYTES( strength // 8 )
    if len( entropy ) * 8 not in BITS:
        raise ValueError( f"BIP-39 entropy must be {commas( BITS, final='or' )} bits, not {len( entropy ) * 8}" )
    return Mnemonic( language or LANGUAGE_DEFAULT ).to_mnemonic( entropy )
