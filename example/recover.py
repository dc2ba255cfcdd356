import argparse
import pyecrecover

# Recover the signer's public key from a message and a signature prefixed by a recovery byte.

parser = argparse.ArgumentParser()
parser.add_argument('--message', type=str, required=True, help='message that was signed')
parser.add_argument('--sig', type=str, required=True, help='signature in hex, prefixed by a recovery byte')
parser.add_argument('--uncompressed', action='store_true', help='print the uncompressed form')
args = parser.parse_args()

pubkey = pyecrecover.core.PubKey.recover(args.message, args.sig)
print(pubkey.hex(not args.uncompressed))
