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

from __future__          import annotations

import click
import json
import logging

from ..			import Registry, produce_mnemonic, KeyDerivationError
from ..defaults		import BITS, BITS_DEFAULT, ETH_SECP256K1, PATH_DEFAULT, SECP256K1
from ..util		import commas, log_cfg, log_level, input_secure

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

"""
Provide basic CLI access to the ethkeyring API.

Output generally defaults to JSON.  Use -v for more details, and --no-json to emit standard text output instead.
"""

log				= logging.getLogger( __package__ )


@click.group()
@click.option('-v', '--verbose', count=True)
@click.option('-q', '--quiet', count=True)
@click.option( '--json/--no-json', default=True, help="Output JSON (the default)")
def cli( verbose, quiet, json ):
    cli.verbosity		= verbose - quiet
    log_cfg['level']		= log_level( cli.verbosity )
    logging.basicConfig( **log_cfg )
    if verbose or quiet:
        logging.getLogger().setLevel( log_cfg['level'] )
    cli.json			= json
    cli.registry		= Registry.default()
cli.verbosity			= 0  # noqa: E305
cli.json			= False
cli.registry			= None


@click.command()
@click.option( '--ledger/--no-ledger', default=False, help="Only the signing algorithms supported by Ledger hardware signers" )
def algorithms( ledger ):
    registry			= cli.registry or Registry.default()
    algos			= registry.supported_algorithms_ledger() if ledger else registry.supported_algorithms()
    if cli.json:
        click.echo( json.dumps( list( algos ), indent=4 ))
    else:
        for algo in algos:
            click.echo( algo )


@click.command()
@click.option( "--algo", default=ETH_SECP256K1, help=f"The signing algorithm (default: {ETH_SECP256K1})" )
@click.option( "--path", "hd_path", default=None, help=f"The HD wallet derivation path; used only by {SECP256K1} (default: {PATH_DEFAULT})" )
@click.option( "--mnemonic", default="-", help="The BIP-39 Mnemonic phrase; '-' reads it from stdin (the default)" )
@click.option( "--passphrase", default=None, help="The BIP-39 passphrase (default: none); '-' reads it from stdin" )
@click.option( "--language", default=None, help="The BIP-39 Mnemonic language (default: detected)" )
def derive( algo, hd_path, mnemonic, passphrase, language ):
    registry			= cli.registry or Registry.default()
    if mnemonic == '-':
        mnemonic		= input_secure( 'BIP-39 Mnemonic: ', secret=True )
    else:
        log.warning( "It is recommended to not use '--mnemonic <phrase>'; specify '-' to read from input" )
    if passphrase == '-':
        passphrase		= input_secure( 'BIP-39 passphrase: ', secret=True )
    try:
        key			= registry.keygen(
            registry.derive_key( mnemonic, passphrase, hd_path, algo, language=language ), algo
        )
    except KeyDerivationError as exc:
        raise click.ClickException( f"{exc.__class__.__name__}: {exc}" ) from exc
    path			= registry.resolve( algo ).strategy.derivation_path( hd_path )  # None if path ignored
    if cli.json:
        click.echo( json.dumps( dict( algo=key.algo, path=path, key=key.hex() ), indent=4 ))
    elif cli.verbosity > 0:
        click.echo( f"{key.algo:14} {path or '':20} {key.hex()}" )
    else:
        click.echo( key.hex() )


@click.command()
@click.option( "--bits", default=BITS_DEFAULT, type=int, help=f"The BIP-39 entropy; {commas( BITS, final='or' )} bits (default: {BITS_DEFAULT})" )
@click.option( "--language", default=None, help="The BIP-39 Mnemonic language (default: english)" )
def mnemonic( bits, language ):
    try:
        phrase			= produce_mnemonic( strength=bits, language=language )
    except ValueError as exc:
        raise click.ClickException( str( exc )) from exc
    if cli.json:
        click.echo( json.dumps( phrase ))
    else:
        click.echo( phrase )


cli.add_command( algorithms )
cli.add_command( derive )
cli.add_command( mnemonic )
