"""Listing field groups and separators used when coercing raw records."""

# Fields coerced from strings / nulls to numbers
INT_FIELDS = ("bedrooms", "max_guests", "total_reviews")
FLOAT_FIELDS = ("base_price", "average_rating")
COORD_FIELDS = ("latitude", "longitude")

# Separator for amenities / images given as one string
LIST_SEPARATOR = ","
