"""
Preset regular expressions for common field formats.

The table is read-only and shared by every validator in the process. Patterns
are compiled with ``re.ASCII`` so ``\\d`` and ``\\w`` only match ASCII
characters.
"""

import re
from types import MappingProxyType

PATTERNS = MappingProxyType({
    # Email address
    "email": re.compile(r"^\w+([-+.]\w+)*@\w+([-.]\w+)*\.\w+([-.]\w+)*$", re.ASCII),
    # Mobile phone number (mainland China)
    "phone": re.compile(
        r"^(13[0-9]|14[5|7]|15[0|1|2|3|4|5|6|7|8|9]|18[0|1|2|3|5|6|7|8|9])\d{8}$", re.ASCII
    ),
    # Internet URL
    "url": re.compile(r"[a-zA-z]+://[^\s]*", re.ASCII),
    # Landline: "XXX-XXXXXXX", "XXXX-XXXXXXXX", "XXXXXXX", "XXXXXXXX"
    "tel": re.compile(r"^((\d{3,4}-)|\d{3.4}-)?\d{7,8}$", re.ASCII),
    # Chinese characters only
    "chinese": re.compile(r"^[\u4e00-\u9fa5]{0,}$", re.ASCII),
    # Resident ID card, 15 or 18 digits, last one may be X
    "id_card": re.compile(r"(^\d{15}$)|(^\d{18}$)|(^\d{17}(\d|X|x)$)", re.ASCII),
    # IPv4 address
    "ip": re.compile(
        r"((2(5[0-5]|[0-4]\d))|[0-1]?\d{1,2})(\.((2(5[0-5]|[0-4]\d))|[0-1]?\d{1,2})){3}", re.ASCII
    ),
    # Postal code (mainland China)
    "postal_code": re.compile(r"[1-9]\d{5}(?!\d)", re.ASCII),
})
