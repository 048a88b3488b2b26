from ecb_fx import UNAVAILABLE, EcbFx, NoDataAvailableError

print(EcbFx.__version__)  # 0.1.0

# Default usage: live ECB feed, bundled snapshot when it is unreachable
fx = EcbFx()

# Single pair
print(fx.rate("USD", "EUR"))

# Convert an amount
print(fx.convert(250, "GBP", "JPY"))

# Full cross-rate table for a chosen base
table = fx.rate_table("CHF")
for code, value in table.rounded().items():
    print(code, "N/A" if value is UNAVAILABLE else value)
print(table.provenance)
# => Provenance(source=<ProvenanceSource.REMOTE: 'remote'>, reason=None, warnings=())

# Plain payload including where the rates came from
print(fx.snapshot("USD"))
# => {'rate_date': date(2025, 6, 13), 'base_currency': 'USD', 'source': 'local',
#     'reason': 'remote fetch failed: transport error (...)', 'warnings': [], 'rates': {...}}

# Tabular handoff for notebooks and reports
print(table.to_frame())

try:
    fx.rate("INR", "AUD")
except NoDataAvailableError as exc:
    print("Could not fetch exchange rate.", exc.provenance)
