from hashfile.core.models import HashAlgorithm, OutputFormat

ALGORITHM_ALIASES = {
    "md5": HashAlgorithm.MD5,
    "sha1": HashAlgorithm.SHA1,
    "sha256": HashAlgorithm.SHA256,
    "sha512": HashAlgorithm.SHA512,
    "blake3": HashAlgorithm.BLAKE3,
}

ALGORITHM_CHOICES = list(ALGORITHM_ALIASES.keys())

ALGORITHM_HELP_TEXT = (
    "Hash algorithm. Default: sha256\n"
    "  md5    : 32 hex chars (checksum only, not collision resistant)\n"
    "  sha1   : 40 hex chars (checksum only, not collision resistant)\n"
    "  sha256 : 64 hex chars\n"
    "  sha512 : 128 hex chars\n"
    "  blake3 : 64 hex chars (fastest)\n"
)

FORMAT_ALIASES = {
    "plain": OutputFormat.PLAIN,
    "bsd": OutputFormat.BSD,
    "gnu": OutputFormat.GNU,
}

FORMAT_CHOICES = list(FORMAT_ALIASES.keys())

FORMAT_HELP_TEXT = (
    "Output line format. Default: plain\n"
    "  plain : <hash> <path>\n"
    "  bsd   : SHA256(<path>) = <hash>\n"
    "  gnu   : <hash> *<path>\n"
)

EPILOG_TEXT = """
Examples:
  Hash a file with the default algorithm (sha256)
  %(prog)s ubuntu.iso

  Hash every file below a directory with BLAKE3, GNU format
  %(prog)s -r ~/Downloads -a blake3 -f gnu > SUMS.blake3

  Print only the hash (for scripts)
  %(prog)s -q ubuntu.iso

  Verify a file against a hash or against a checksum file
  %(prog)s --verify 9f86d081884c7d65... ubuntu.iso
  %(prog)s --verify SHA256SUMS ubuntu.iso

  Find duplicate files
  %(prog)s --duplicates -r ~/Pictures

  Hash a list of files read from stdin
  find . -name '*.pdf' | %(prog)s --stdin
"""
