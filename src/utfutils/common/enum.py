from enum import IntEnum

class IntEnum2(IntEnum):
    def __str__(self):
        return self.name

    def __repr__(self):
        return self.__str__()


class SurrogateRange(IntEnum2):
    '''Reserved range checked by encoders in strict mode'''

    Closed  = 0     # 0xD800 <= cp <= 0xDFFF
    Legacy  = 1     # 0xD800 <  cp <  0xDC00
