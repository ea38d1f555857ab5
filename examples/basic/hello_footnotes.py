"""Convert inline footnotes in 3 lines — zero config, zero deps."""

from footmark import convert_bytes

output = convert_bytes(b"Footmark(a small library) turns notes(like this one) into references.#")
print(output.decode())
