import argparse
import pyecrecover

# Sign a message. The message is hashed with sha256 before signing.

parser = argparse.ArgumentParser()
parser.add_argument('--prikey', type=str, required=True, help='private key in hex')
parser.add_argument('--message', type=str, required=True, help='message to sign')
parser.add_argument('--recovery', action='store_true', help='prefix the signature with a recovery byte')
args = parser.parse_args()

prikey = pyecrecover.core.PriKey.hex_decode(args.prikey)
print(prikey.sign(args.message, args.recovery))
