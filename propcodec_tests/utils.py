from propcodec import PropertyReader, PropertySerializable, PropertyWriter


class Account(PropertySerializable):
    """Small object with one property of each type, counts how many times each hook runs."""

    def __init__(self, amount: int = 0, owner: str = '', rate: float = 0.0) -> None:
        self.amount = amount
        self.owner = owner
        self.rate = rate
        self.serialize_calls = 0
        self.deserialize_calls = 0

    def serialize_properties(self, writer: PropertyWriter) -> None:
        self.serialize_calls += 1
        writer.add_property('amount', self.amount)
        writer.add_property('owner', self.owner)
        writer.add_property('rate', self.rate)

    def deserialize_properties(self, reader: PropertyReader) -> None:
        self.deserialize_calls += 1
        self.amount = reader.get_int_property('amount')
        self.owner = reader.get_string_property('owner')
        self.rate = reader.get_real_property('rate')


class Counter(PropertySerializable):
    """Only writes a single integer, the one used in the documentation examples."""

    def __init__(self, amount: int = 0) -> None:
        self.amount = amount

    def serialize_properties(self, writer: PropertyWriter) -> None:
        writer.add_property('amount', self.amount)

    def deserialize_properties(self, reader: PropertyReader) -> None:
        self.amount = reader.get_int_property('amount')
