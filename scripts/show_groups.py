from kanasort.records import BusinessCard
from kanasort.resolver import resolve_reading
from kanasort.utils import group_by_primary_field

# a few cards as they come back from the OCR step
cards = [
    BusinessCard(name="鈴木一郎", company="株式会社日立"),
    BusinessCard(name="たなか", company="トヨタ"),
    BusinessCard(name="Smith", company="ANA"),
    BusinessCard(name="後藤 花子", company="伊藤忠商事"),
    BusinessCard(name="王 明", name_reading="ワン ミン", company="任天堂"),
    BusinessCard(name="ﾊﾞﾊﾞ ｼﾞｮｳｼﾞ", company="Acme"),
]


def main():
    for field in ("name", "company"):
        print(f"== {field}")
        for group in group_by_primary_field(cards, field):
            print(f"[{group.label}]")
            for card in group.records:
                text = getattr(card, field)
                reading = getattr(card, f"{field}_reading")
                print(f"  {text}  ({resolve_reading(text, reading)})")
        print('-'*40)


if __name__ == '__main__':
    main()
