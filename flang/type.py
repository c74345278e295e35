from enum import Enum
from types import MappingProxyType


class Type(Enum):
    LRB = "("
    RRB = ")"
    QUOTE = "quote"
    PLUS = "plus"
    MINUS = "minus"
    TIMES = "times"
    DIVIDE = "divide"
    EQUAL = "equal"
    NONEQUAL = "nonequal"
    LESS = "less"
    LESSEQ = "lesseq"
    GREATER = "greater"
    GREATEREQ = "greatereq"
    ISINT = "isint"
    ISREAL = "isreal"
    ISBOOL = "isbool"
    ISNULL = "isnull"
    ISATOM = "isatom"
    ISLIST = "islist"
    AND = "and"
    OR = "or"
    XOR = "xor"
    NOT = "not"
    HEAD = "head"
    TAIL = "tail"
    CONS = "cons"
    EVAL = "eval"
    SETQ = "setq"
    FUNC = "func"
    LAMBDA = "lambda"
    PROG = "prog"
    COND = "cond"
    WHILE = "while"
    RETURN = "return"
    BREAK = "break"
    VALUE = "value"
    ID = "identifier"
    INTEGER = "integer"
    REAL = "real"
    BOOLEAN = "boolean"
    EOL = "end of line"
    EOF = "end of input"

    def to_type(type_str: str):
        return Type[type_str]

    def __str__(self) -> str:
        match self:
            case Type.ID | Type.INTEGER | Type.REAL | Type.BOOLEAN | Type.EOL | Type.EOF:
                return self.value
        return repr(self.value)

    def article_str(self) -> str:
        match self:
            case Type.ID | Type.INTEGER | Type.EOL | Type.EOF:
                return f"an {self}"
            case Type.REAL | Type.BOOLEAN:
                return f"a {self}"
        return str(self)


# Lowercase lexeme -> keyword kind. `true`/`false` are not keywords, they scan as booleans.
KEYWORDS = MappingProxyType(
    {
        token_type.value: token_type
        for token_type in Type
        if token_type.value.isalpha()
        and token_type not in (Type.ID, Type.INTEGER, Type.REAL, Type.BOOLEAN)
    }
)

BOOLEANS = MappingProxyType({"true": True, "false": False})

# Heads of a list that get their own grammar instead of being a plain function call
SPECIAL_FORMS = frozenset(("setq", "cond", "func", "lambda", "prog", "while"))
