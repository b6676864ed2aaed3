# ============================================================================
# src/clinical_consolidation/constants/priority_orders.py
# ============================================================================
"""
Priority Orders
- Canonical lowercase tokens, index 0 = highest rank
- Values not listed rank after every listed value
"""

# Returned for any value missing from an order
SENTINEL_PRIORITY = 999

# ServiceRequest.priority for imaging orders
RADIOLOGY_PRIORITY_ORDER = ["stat", "routine"]

# Lab orders only distinguish urgent from everything else
LAB_PRIORITY_ORDER = ["urgent"]

# Medications only distinguish STAT (immediate) from everything else
MEDICATION_PRIORITY_ORDER = ["stat"]

# entered-in-error, draft and unknown fall through to the sentinel
MEDICATION_STATUS_ORDER = ["active", "on-hold", "completed", "stopped", "cancelled"]

ALLERGY_SEVERITY_ORDER = ["severe", "moderate", "mild"]
