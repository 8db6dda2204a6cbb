"""Org ledger: a company's departments, employees and sales, plus reports over them."""
