# File: paperdrill_app/modules/stats/__init__.py
# Daily completion statistics derived from the append-only ledger.
