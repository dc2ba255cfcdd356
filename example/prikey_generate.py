import pyecrecover

# Generate a random private key and print it along with its public key.

prikey = pyecrecover.core.PriKey.random()
pubkey = prikey.pubkey()
print(f'prikey = {prikey}')
print(f'pubkey = {pubkey}')
