"""CLI — командный диспетчер bignum-rsa (stdin → stdout)."""
