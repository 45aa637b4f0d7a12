FULL_ASCII95 = ("0123456789"
                "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
                "abcdefghijklmnopqrstuvwxyz"
                "-_:+.=^!/*?~$(),;@&<>[]{}%#|`\\ \"'")

BASE32_RFC4648 = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

# http://philzimmermann.com/docs/human-oriented-base-32-encoding.txt
Z_BASE32 = "ybndrfg8ejkmcpqxot1uwisza345h769"

BASE58 = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

BASE58_FLICKR = "123456789abcdefghijkmnopqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ"

BASE58_RIPPLE = "rpshnaf39wBUDNEGHJKLM4PQRST7VWXYZ2bcdeCg65jkm8oFqi1tuvAxyz"

BASE64_RFC4648_62 = ("ABCDEFGHIJKLMNOPQRSTUVWXYZ"
                     "abcdefghijklmnopqrstuvwxyz"
                     "0123456789")

BASE64 = BASE64_RFC4648_62 + "+/"

BASE64_SAFE = BASE64_RFC4648_62 + "-_"

DIGITS_AND_LETTERS = "0123456789abcdefghijklmnopqrstuvwxyz"
