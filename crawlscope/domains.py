"""Public-suffix lookups and registrable-domain helpers."""

from __future__ import annotations

_RULES_TEXT = """
com net org edu gov mil int arpa info biz name pro mobi asia tel travel
io co me tv ai app dev xyz online site tech store blog cloud page
us ca mx br ar cl pe uk de fr it es pt nl be lu ch at se no dk fi is ie
pl cz sk hu ro bg gr tr ru ua by eu jp cn kr in au nz za sg hk tw il
ae sa eg ng ke id my th vn ph pk ir
co.uk org.uk ac.uk gov.uk ltd.uk plc.uk me.uk net.uk sch.uk nhs.uk
com.au net.au org.au edu.au gov.au asn.au id.au
co.nz net.nz org.nz ac.nz govt.nz
co.jp ne.jp or.jp ac.jp go.jp ad.jp ed.jp gr.jp lg.jp
co.in net.in org.in gov.in ac.in edu.in res.in firm.in gen.in ind.in
com.br net.br org.br gov.br edu.br
com.cn net.cn org.cn gov.cn edu.cn ac.cn
co.kr or.kr ne.kr go.kr ac.kr re.kr
com.mx org.mx gob.mx edu.mx net.mx
com.ar org.ar gob.ar net.ar edu.ar
com.tr org.tr gov.tr edu.tr net.tr
com.sg org.sg gov.sg edu.sg net.sg
com.hk org.hk gov.hk edu.hk net.hk
com.tw org.tw gov.tw edu.tw net.tw
co.il org.il gov.il ac.il net.il
co.za org.za gov.za ac.za net.za
com.eg com.sa com.pk com.ph com.my com.vn co.id co.th
*.ck !www.ck *.bd *.er *.fk *.jm *.kh *.mm *.np
"""

_RULES: frozenset[str] = frozenset(_RULES_TEXT.split())


def _check_labels(domain: str) -> None:
    if domain.startswith(".") or domain.endswith(".") or ".." in domain:
        raise ValueError(f"publicsuffix: empty label in domain {domain!r}")


def public_suffix(domain: str) -> str:
    """Return the public suffix of ``domain``; unknown TLDs count as suffixes."""
    labels = domain.split(".")
    for i in range(len(labels)):
        candidate = ".".join(labels[i:])
        if "!" + candidate in _RULES:
            return ".".join(labels[i + 1:])
        if candidate in _RULES:
            return candidate
        rest = labels[i + 1:]
        if rest and "*." + ".".join(rest) in _RULES:
            return candidate
    return labels[-1]


def effective_tld_plus_one(domain: str) -> str:
    """Return the public suffix plus one label, raising ValueError if none exists."""
    _check_labels(domain)
    suffix = public_suffix(domain)
    if len(domain) <= len(suffix):
        raise ValueError(f"publicsuffix: cannot derive eTLD+1 for domain {domain!r}")
    i = len(domain) - len(suffix) - 1
    if domain[i] != ".":
        raise ValueError(f"publicsuffix: invalid public suffix {suffix!r} for domain {domain!r}")
    return domain[domain.rfind(".", 0, i) + 1:]


def domain_rdn_and_dn(domain: str) -> tuple[str, str]:
    """Split a domain into its registrable domain and the bare name before the suffix."""
    _check_labels(domain)
    suffix = public_suffix(domain)
    if len(domain) <= len(suffix):
        return domain, ""
    i = len(domain) - len(suffix) - 1
    if domain[i] != ".":
        return domain, ""
    start = domain.rfind(".", 0, i) + 1
    return domain[start:], domain[start:i]