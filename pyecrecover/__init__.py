import pyecrecover.config
import pyecrecover.core
import pyecrecover.der
import pyecrecover.ecdsa
import pyecrecover.error
import pyecrecover.objectdict
import pyecrecover.rfc6979
import pyecrecover.secp256k1
