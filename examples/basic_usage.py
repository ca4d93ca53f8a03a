# python
import logging
import os

from config_tree import Builder

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    defaults = {
        "name": "Cooper",
        "proxy": {"port": 9999, "params": [0, 1, 2], "map": {"name": "Harry"}},
        "emptyMap": {},
    }

    config = (
        Builder(defaults)
        .put_of("name", os.environ.get("APP_NAME"))
        .put_if_empty("proxy.port", 7777)
        .put("proxy.user", "Bob")
        .put("proxy.map", None)
        .build()
    )

    print("Name:", config.get("name"))
    print("Port:", config.get("proxy.port", value_type=int))
    print("User:", config.get(" proxy . user "))
    print("Paths:", sorted(config.paths()))
