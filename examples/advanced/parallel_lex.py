"""Thread-safe: lex 1000 patches in parallel."""

from concurrent.futures import ThreadPoolExecutor

from jbpl import lex

patches = [f"define N{i} = {i}i32\nfun <Foo> .run() {{ ldc N{i} }}" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(lex, patches))

print(f"Lexed {len(results)} patches in parallel")
print("First patch tokens:", len(results[0]))
print("Last patch tokens:", len(results[-1]))
