import argparse
import pyecrecover

# Verify a signature, plain or prefixed by a recovery byte, against a public key.

parser = argparse.ArgumentParser()
parser.add_argument('--pubkey', type=str, required=True, help='public key in x.509 hex')
parser.add_argument('--message', type=str, required=True, help='message that was signed')
parser.add_argument('--sig', type=str, required=True, help='signature in hex')
args = parser.parse_args()

pubkey = pyecrecover.core.PubKey.hex_decode(args.pubkey)
print(pubkey.verify(args.message, args.sig))
