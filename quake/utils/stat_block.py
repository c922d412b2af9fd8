# stat_block.py
# Text helpers for showing monsters: display defaults and Markdown stat blocks

from quake.core.models.monster import ABILITY_SCORES

UNKNOWN = "Unknown"


def display_text(value, default=UNKNOWN):
    """Text for a label, using default when the value is empty"""
    return value if value else default


def ability_modifier(score):
    """5e ability modifier for a score, e.g. 14 -> +2"""
    return (score - 10) // 2


def format_modifier(value):
    return f"+{value}" if value >= 0 else str(value)


def monster_summary_lines(monster):
    """Lines shown in the 'Monster Stats' section of a character row"""
    lines = [
        f"Type: {display_text(monster.type)}",
        f"AC: {monster.armor_class}",
        f"Speed: {display_text(monster.speed)}",
        f"Alignment: {display_text(monster.alignment)}",
    ]
    for ability in ABILITY_SCORES:
        lines.append(f"{ability.capitalize()}: {getattr(monster, ability)}")
    return lines


def _optional_line(label, value):
    return [f"**{label}** {value}  "] if value else []


def monster_to_markdown(monster):
    """
    Build a Markdown stat block for a monster.

    Empty fields are left out rather than shown as blanks.
    """
    lines = [f"# {display_text(monster.name)}", ""]

    meta = " ".join(part for part in (monster.size, monster.type) if part)
    if monster.subtype:
        meta = f"{meta} ({monster.subtype})"
    if monster.alignment:
        meta = f"{meta}, {monster.alignment}" if meta else monster.alignment
    if meta:
        lines += [f"*{meta}*", ""]

    armor = str(monster.armor_class)
    if monster.armor_desc:
        armor = f"{armor} ({monster.armor_desc})"
    hit_points = str(monster.hit_points)
    if monster.hit_dice:
        hit_points = f"{hit_points} ({monster.hit_dice})"
    lines.append(f"**Armor Class** {armor}  ")
    lines.append(f"**Hit Points** {hit_points}  ")
    lines += _optional_line("Speed", monster.speed)
    lines.append("")

    headers = [ability[:3].upper() for ability in ABILITY_SCORES]
    scores = [
        f"{getattr(monster, ability)} ({format_modifier(ability_modifier(getattr(monster, ability)))})"
        for ability in ABILITY_SCORES
    ]
    lines.append("| " + " | ".join(headers) + " |")
    lines.append("|" + "---|" * len(headers))
    lines.append("| " + " | ".join(scores) + " |")
    lines.append("")

    saves = []
    for label, value in (("Con", monster.constitution_save),
                         ("Int", monster.intelligence_save),
                         ("Wis", monster.wisdom_save)):
        if value:
            saves.append(f"{label} {format_modifier(value)}")
    skills = []
    if monster.history:
        skills.append(f"History {format_modifier(monster.history)}")
    if monster.perception:
        skills.append(f"Perception {format_modifier(monster.perception)}")

    lines += _optional_line("Saving Throws", ", ".join(saves))
    lines += _optional_line("Skills", ", ".join(skills))
    lines += _optional_line("Damage Vulnerabilities", monster.damage_vulnerabilities)
    lines += _optional_line("Damage Resistances", monster.damage_resistances)
    lines += _optional_line("Damage Immunities", monster.damage_immunities)
    lines += _optional_line("Condition Immunities", monster.condition_immunities)
    lines += _optional_line("Senses", monster.senses)
    lines += _optional_line("Languages", monster.languages)
    lines.append(f"**Challenge** {monster.challenge_rating}")
    lines.append("")

    if monster.special_abilities:
        lines += ["## Special Abilities", ""]
        for ability in monster.special_abilities:
            lines += [f"***{display_text(ability.name)}.*** {ability.desc}", ""]

    if monster.actions:
        lines += ["## Actions", ""]
        for action in monster.actions:
            lines += [f"***{display_text(action.name)}.*** {action.desc}", ""]

    if monster.legendary_actions or monster.legendary_desc:
        lines += ["## Legendary Actions", ""]
        if monster.legendary_desc:
            lines += [monster.legendary_desc, ""]
        for action in monster.legendary_actions:
            lines += [f"***{display_text(action.name)}.*** {action.desc}", ""]

    return "\n".join(lines)
