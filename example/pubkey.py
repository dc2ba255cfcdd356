import argparse
import pyecrecover

# Calculate the public key of a private key.

parser = argparse.ArgumentParser()
parser.add_argument('--prikey', type=str, required=True, help='private key in hex')
parser.add_argument('--uncompressed', action='store_true', help='print the uncompressed form')
args = parser.parse_args()

prikey = pyecrecover.core.PriKey.hex_decode(args.prikey)
pubkey = prikey.pubkey()
print(pubkey.hex(not args.uncompressed))
