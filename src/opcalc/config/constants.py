"""Calendar constants shared by the option record and pricing engines."""

SECONDS_PER_DAY = 86_400
# Timestamps are converted to years on a flat 365-day year.
SECONDS_PER_YEAR = 365 * SECONDS_PER_DAY
