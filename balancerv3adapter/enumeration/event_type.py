from enum import Enum, unique


@unique
class EventType(str, Enum):
    SWAP = 'swap'
    JOIN = 'join'
    EXIT = 'exit'

    def __str__(self):
        return self.value


@unique
class AddRemoveType(str, Enum):
    ADD = 'ADD'
    REMOVE = 'REMOVE'

    def __str__(self):
        return self.value
