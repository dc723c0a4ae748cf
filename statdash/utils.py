import csv

import chardet


def detect_encoding(path: str, sample_size: int = 4096) -> str:
    with open(path, "rb") as f:
        raw = f.read(sample_size)
    if not raw:
        return "utf-8"
    res = chardet.detect(raw)
    return res.get("encoding") or "utf-8"


def sniff_delimiter(sample: str) -> str:
    sample = sample[:16384]
    try:
        delim = csv.Sniffer().sniff(sample, delimiters=",\t;|").delimiter
        # sniffer sometimes returns whitespace or '\r'
        if delim and delim.strip():
            return delim
    except csv.Error:
        pass

    # fallback: pick the common delimiter giving the most, and most stable, columns
    candidates = [',', '\t', ';', '|']
    lines = [l for l in sample.splitlines() if l.strip()][:20]
    if not lines:
        return ','
    best = ','
    best_score = -1.0
    for d in candidates:
        counts = [len(l.split(d)) for l in lines]
        score = (sum(counts) / len(counts)) - (max(counts) - min(counts)) * 0.1
        if score > best_score:
            best_score = score
            best = d
    return best

