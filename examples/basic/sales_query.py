"""Build a parameterized query and run it against an in-memory SQLite db."""

import sqlite3

from joinery import join

conn = sqlite3.connect(":memory:")
conn.execute("CREATE TABLE sales (product TEXT, price REAL)")
conn.executemany(
    "INSERT INTO sales VALUES (?, ?)",
    [("lamp", 20.0), ("lamp", 35.0), ("desk", 250.0), ("pen", 2.0)],
)

filters = join(" AND ").add("price > ?", 5)

query, params = (
    join(" ")
    .add("SELECT product, SUM(price) FROM sales WHERE")
    .add(filters)
    .add("GROUP BY product HAVING COUNT(*) > ?", 1)
    .must_end()
)
print(query, params)
print(conn.execute(query, params).fetchall())
