""" Diagnostics: visibility into fields dropped by the allow-list """

from collections import Counter


class RejectedFieldCounter(Counter):
    """ Counts rejected fields per (operation, field name)

    Example:
        counter = RejectedFieldCounter()
        settings = FilterSettings(rejected_field_callback=counter)
        ...
        counter[('match', 'password')]  #-> 1
    """

    def __call__(self, operation: str, field_name: str):
        self[(operation, field_name)] += 1

    def by_operation(self, operation: str) -> dict[str, int]:
        """ Get {field name: count} for one operation """
        return {
            field_name: n
            for (op, field_name), n in self.items()
            if op == operation
        }
