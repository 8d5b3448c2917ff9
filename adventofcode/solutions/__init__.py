"""Solutions for puzzle days 1 to 6, one module per day."""