"""
Contracts (data shapes).

This folder defines the record shapes and pure helpers shared by the remote
backend clients and the local mock store, e.g.:
- product, cart item, order, newsletter and contact records
- cart line keys and aggregate totals
- payment command requests/results

Both clients/mocks/* and clients/real_http/* shape their data according to
these contracts. The models allow extra fields: the data layer passes
through whatever each side returns and only normalizes what it writes.
"""
