"""Writers serializing document layouts."""
