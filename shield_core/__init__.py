"""
Shield Core Package
===================
Privacy policy and viewing-key governance for a shielded-asset wallet.

Provides:
- Address classification and shielded-address validation
- Amount-based privacy tiers and partial-note policy
- Memo length capping
- Viewing-key hash validation, masking, expiry and canonical export
- Send planning and wallet privacy scoring

Every function is pure; nothing here touches raw key material, storage or the network.
"""
