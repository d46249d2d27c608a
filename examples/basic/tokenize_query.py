"""Tokenize a query and print each token the way an editor would show it."""

from consulta import InvalidTokenError, tokenize

for query in ['categoria 12345 1234 "caixa"', "produto é 102234"]:
    try:
        tokens = tokenize(query)
    except InvalidTokenError as e:
        print(f"{query!r}: {e}")
        continue
    print(f"{query!r}: {[str(t) for t in tokens]}")
