"""Virtual Stylist - outfit suggestions for a virtual try-on storefront.

Picks one complementary garment for the product being viewed, using an
optional chat-completion model with a rule-based fallback.
"""

__version__ = "0.1.0"
__author__ = "Virtual Stylist Team"
