"""Converter for RSA objects."""

from typing import Dict

from ..mpc import MPC
from ..rsa.RSA import RSA


class RSAConverter:
    """Converter for exporting RSA parameters as hex strings."""

    @staticmethod
    def to_dict(rsa: RSA) -> Dict[str, str]:
        """Convert an RSA instance to a dict of hex strings.

        Args:
            rsa (RSA): The RSA instance to convert

        Returns:
            Dict[str, str]: Parameter name to hex digits (no 0x prefix)
        """
        return {
            "p": MPC.to_hex(rsa.get_p()),
            "q": MPC.to_hex(rsa.get_q()),
            "N": MPC.to_hex(rsa.get_N()),
            "phi": MPC.to_hex(rsa.get_phi()),
            "e": MPC.to_hex(rsa.get_e()),
            "d": MPC.to_hex(rsa.get_d()),
        }
