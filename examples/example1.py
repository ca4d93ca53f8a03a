from config_tree import Builder, Config, ConfigStructureError, ConfigTypeError

if __name__ == "__main__":
    config = Config({"proxy": {"port": 9999}, "hosts": ["a", "b"]})

    try:
        config.get("proxy.port", value_type=str)
    except ConfigTypeError as exc:
        print("Wrong type:", exc)

    try:
        config.get("hosts").append("c")
    except AttributeError as exc:
        print("Frozen:", exc)

    builder = config.to_builder(failure_mode="raise")
    try:
        builder.put("proxy.port.number", 1)
    except ConfigStructureError as exc:
        print("Conflict:", exc)

    lenient = config.to_builder().put("", "ignored").put("proxy.port.number", 1)
    print("Swallowed errors:", lenient.errors)
    print("Unchanged:", lenient.build() == config)
