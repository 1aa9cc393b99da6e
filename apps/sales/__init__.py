"""
Sales app: POS checkout, orders and order items.
"""
