# 전파(Naked Single)만으로 풀리는 예제 두 개 (quiz, solution)
PUZZLES = [
    (
        "805400000"
        "002000045"
        "000060290"
        "946000010"
        "070090000"
        "020705030"
        "050004702"
        "080010400"
        "460050300",
        "815429673"
        "692378145"
        "734561298"
        "946832517"
        "573196824"
        "128745936"
        "351984762"
        "287613459"
        "469257381",
    ),
    (
        "000105070"
        "200006030"
        "003008040"
        "005802003"
        "802004700"
        "196000480"
        "378060510"
        "420500300"
        "060473029",
        "984135276"
        "257946138"
        "613728945"
        "745812693"
        "832694751"
        "196357482"
        "378269514"
        "429581367"
        "561473829",
    ),
]
