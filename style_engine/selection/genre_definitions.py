"""Static genre selection definitions.

Pools are walked in ``poolOrder``; ``maxTags`` is the total budget. Pool items
are raw tokens, resolved through the instrument registry at selection time.
"""
from __future__ import annotations

from typing import Dict

from style_engine.selection.definitions import SelectionDefinition

AMBIENT_GENRE = SelectionDefinition.build(
    name='Ambient',
    description='Soothing, curiosity-sparking soundscapes with unusual textures and gentle movement',
    pools={
        # Foundation - keyboards and strings (no piano by default)
        'foundation': {
            'pick': {'min': 1, 'max': 2},
            'items': [
                'Rhodes', 'Wurlitzer', 'electric piano', 'mellotron', 'harmonium', 'celesta',
                'strings', 'nylon string guitar', 'fretless guitar',
            ],
        },
        'texture': {
            'pick': {'min': 1, 'max': 2},
            'items': [
                'synth pad', 'ambient pad', 'crystalline synth pads',
                'analog synth pads', 'synth strings', 'wordless choir',
            ],
        },
        'evolving': {
            'pick': {'min': 0, 'max': 1},
            'chanceToInclude': 0.6,
            'items': [
                'granular synth', 'wavetable synth', 'tape loops', 'drone',
                'shimmer pad', 'FM synth', 'Moog synth',
            ],
        },
        'piano': {
            'pick': {'min': 0, 'max': 1},
            'chanceToInclude': 0.25,
            'items': ['felt piano', 'prepared piano'],
        },
        # Curiosity - unusual instruments, high priority
        'curiosity': {
            'pick': {'min': 1, 'max': 2},
            'chanceToInclude': 0.8,
            'items': [
                'singing bowls', 'crystal bowls', 'kalimba', 'glass bells',
                'bansuri', 'shakuhachi', 'duduk', 'tongue drum', 'handpan',
                'koto', 'bowed vibraphone', 'mark tree', 'tam tam',
                'english horn', 'oboe', 'solo soprano',
            ],
        },
        'world': {
            'pick': {'min': 0, 'max': 1},
            'chanceToInclude': 0.5,
            'items': ['sitar', 'erhu', 'oud', 'marimba', 'steel pan', 'vibraphone', 'cello', 'harp'],
        },
        'movement': {
            'pick': {'min': 0, 'max': 1},
            'chanceToInclude': 0.3,
            'items': [
                'rain stick', 'ocean drum', 'shaker', 'frame drum',
                'jazz brushes', 'suspended cymbal', 'finger snaps',
            ],
        },
        'rare': {
            'pick': {'min': 0, 'max': 1},
            'chanceToInclude': 0.15,
            'items': ['waterphone', 'glass armonica', 'theremin', 'prepared piano'],
        },
    },
    pool_order=['foundation', 'texture', 'evolving', 'piano', 'curiosity', 'world', 'movement', 'rare'],
    max_total=5,
    exclusion_rules=[
        ('singing bowls', 'crystal bowls'),
        ('bansuri', 'shakuhachi'),
        ('kalimba', 'tongue drum'),
        ('harp', 'koto'),
        ('prepared piano', 'felt piano'),
        ('Rhodes', 'Wurlitzer'),
        ('Rhodes', 'electric piano'),
    ],
    bpm={'min': 60, 'max': 90, 'typical': 78},
    moods=['Dreamy', 'Ethereal', 'Meditative', 'Calm', 'Floaty', 'Spacious', 'Otherworldly', 'Serene', 'Hypnotic'],
)

JAZZ_GENRE = SelectionDefinition.build(
    name='Jazz',
    description='Swinging small-group jazz with rich harmony and a warm rhythm section',
    pools={
        'harmony': {
            'pick': {'min': 1, 'max': 1},
            'items': ['grand piano', 'Rhodes', 'hollowbody guitar', 'vibraphone', 'Hammond organ'],
        },
        'rhythm': {
            'pick': {'min': 1, 'max': 2},
            'items': ['upright bass', 'walking bass', 'jazz brushes', 'ride cymbal', 'drums'],
        },
        'lead': {
            'pick': {'min': 1, 'max': 2},
            'items': [
                'tenor sax', 'alto sax', 'soprano sax', 'muted trumpet', 'trumpet',
                'flugelhorn', 'trombone', 'clarinet', 'flute',
            ],
        },
        'color': {
            'pick': {'min': 0, 'max': 1},
            'chanceToInclude': 0.35,
            'items': ['congas', 'bongos', 'finger snaps', 'bass clarinet', 'baritone saxophone'],
        },
    },
    pool_order=['harmony', 'rhythm', 'lead', 'color'],
    max_total=4,
    exclusion_rules=[
        ('upright bass', 'walking bass'),
        ('jazz brushes', 'drums'),
        ('Rhodes', 'Hammond'),
        ('trumpet', 'flugelhorn'),
    ],
    bpm={'min': 80, 'max': 160, 'typical': 120},
    moods=['Smooth', 'Sophisticated', 'Smoky', 'Late Night', 'Swinging', 'Intimate'],
)

LOFI_GENRE = SelectionDefinition.build(
    name='Lo-Fi',
    description='Dusty, laid-back beats with warm keys and tape character',
    pools={
        'keys': {
            'pick': {'min': 1, 'max': 1},
            'items': ['Rhodes', 'Wurlitzer', 'felt piano', 'electric piano'],
        },
        'beat': {
            'pick': {'min': 1, 'max': 2},
            'items': ['drums', 'kick drum', 'snare drum', 'hi-hat', 'jazz brushes'],
        },
        'low_end': {
            'pick': {'min': 1, 'max': 1},
            'items': ['bass', 'upright bass', 'synth bass'],
        },
        'texture': {
            'pick': {'min': 0, 'max': 1},
            'chanceToInclude': 0.7,
            'items': ['vinyl noise', 'tape loops', 'field recordings', 'ambient guitar'],
        },
        'color': {
            'pick': {'min': 0, 'max': 1},
            'chanceToInclude': 0.4,
            'items': ['muted trumpet', 'flute', 'vibraphone', 'kalimba', 'nylon string guitar'],
        },
    },
    pool_order=['keys', 'beat', 'low_end', 'texture', 'color'],
    max_total=5,
    exclusion_rules=[
        ('Rhodes', 'Wurlitzer'),
        ('jazz brushes', 'snare'),
        ('upright bass', 'synth bass'),
    ],
    bpm={'min': 70, 'max': 90, 'typical': 80},
    moods=['Chill', 'Nostalgic', 'Cozy', 'Melancholic', 'Relaxed', 'Hazy'],
)

TRAP_GENRE = SelectionDefinition.build(
    name='Trap',
    description='Hard-hitting 808s, rolling hi-hats and dark melodic loops',
    pools={
        'drums': {
            'pick': {'min': 2, 'max': 2},
            'items': ['808', 'trap hi hats', 'snare drum', 'handclaps', 'kick drum'],
        },
        'melody': {
            'pick': {'min': 1, 'max': 2},
            'items': ['dark piano', 'synth pad', 'pluck synth', 'bells', 'flute', 'choir'],
        },
        'texture': {
            'pick': {'min': 0, 'max': 1},
            'chanceToInclude': 0.5,
            'items': ['FX risers', 'vinyl noise', 'glitched vocals', 'pitched vocals'],
        },
    },
    pool_order=['drums', 'melody', 'texture'],
    max_total=4,
    exclusion_rules=[
        ('808', 'kick'),
        ('glitched vocals', 'pitched vocals'),
    ],
    bpm={'min': 130, 'max': 170, 'typical': 140},
    moods=['Dark', 'Aggressive', 'Menacing', 'Confident', 'Hypnotic'],
)

ROCK_GENRE = SelectionDefinition.build(
    name='Rock',
    description='Guitar-driven band sound with a solid backbeat',
    pools={
        'guitars': {
            'pick': {'min': 1, 'max': 2},
            'items': ['distorted guitar', 'guitar', 'Fender Stratocaster', 'Telecaster', 'acoustic guitar'],
        },
        'rhythm': {
            'pick': {'min': 2, 'max': 2},
            'items': ['drums', 'bass', 'picked bass'],
        },
        'keys': {
            'pick': {'min': 0, 'max': 1},
            'chanceToInclude': 0.4,
            'items': ['Hammond organ', 'grand piano', 'mellotron', 'synth'],
        },
        'color': {
            'pick': {'min': 0, 'max': 1},
            'chanceToInclude': 0.2,
            'items': ['harmonica', 'tambourine', 'slide guitar', 'strings'],
        },
    },
    pool_order=['guitars', 'rhythm', 'keys', 'color'],
    max_total=5,
    exclusion_rules=[
        ('bass', 'picked bass'),
        ('Stratocaster', 'Telecaster'),
    ],
    bpm={'min': 100, 'max': 150, 'typical': 120},
    moods=['Energetic', 'Raw', 'Anthemic', 'Gritty', 'Rebellious'],
)

ELECTRONIC_GENRE = SelectionDefinition.build(
    name='Electronic',
    description='Synth-led club and home-listening electronica',
    pools={
        'synths': {
            'pick': {'min': 1, 'max': 2},
            'items': ['analog synth', 'supersaw', 'arpeggiator', 'wavetable synth', 'FM synth', 'Moog synth'],
        },
        'drums': {
            'pick': {'min': 1, 'max': 2},
            'items': ['TR-909', 'kick drum', 'hi-hat', 'handclaps', 'Linn drum'],
        },
        'bass': {
            'pick': {'min': 1, 'max': 1},
            'items': ['synth bass', 'sub-bass', 'TB-303'],
        },
        'texture': {
            'pick': {'min': 0, 'max': 1},
            'chanceToInclude': 0.5,
            'items': ['sidechain pad', 'FX risers', 'vocoder', 'granular synth'],
        },
    },
    pool_order=['synths', 'drums', 'bass', 'texture'],
    max_total=5,
    exclusion_rules=[
        ('TR-909', 'Linn drum'),
        ('supersaw', 'FM synth'),
    ],
    bpm={'min': 110, 'max': 140, 'typical': 124},
    moods=['Euphoric', 'Driving', 'Hypnotic', 'Futuristic', 'Pulsing'],
)

FOLK_GENRE = SelectionDefinition.build(
    name='Folk',
    description='Acoustic storytelling with traditional string instruments',
    pools={
        'strings': {
            'pick': {'min': 1, 'max': 2},
            'items': ['acoustic guitar', 'nylon string guitar', 'mandolin', 'banjo', 'fiddle', 'mountain dulcimer'],
        },
        'support': {
            'pick': {'min': 0, 'max': 1},
            'items': ['upright bass', 'cello', 'harmonium', 'accordion'],
        },
        'color': {
            'pick': {'min': 0, 'max': 1},
            'chanceToInclude': 0.5,
            'items': ['tin whistle', 'harmonica', 'concertina', 'hurdy gurdy', 'frame drum'],
        },
    },
    pool_order=['strings', 'support', 'color'],
    max_total=4,
    exclusion_rules=[
        ('harmonium', 'accordion'),
        ('tin whistle', 'harmonica'),
    ],
    bpm={'min': 70, 'max': 120, 'typical': 96},
    moods=['Earthy', 'Warm', 'Nostalgic', 'Pastoral', 'Heartfelt'],
)

CINEMATIC_GENRE = SelectionDefinition.build(
    name='Cinematic',
    description='Orchestral scoring with hybrid trailer elements',
    pools={
        'orchestra': {
            'pick': {'min': 1, 'max': 2},
            'items': ['strings', 'string ostinato', 'french horn', 'low brass', 'choir'],
        },
        'percussion': {
            'pick': {'min': 1, 'max': 1},
            'items': ['taiko drums', 'timpani', 'orchestral bass drum', 'toms'],
        },
        'hybrid': {
            'pick': {'min': 0, 'max': 1},
            'chanceToInclude': 0.6,
            'items': ['braams', 'impacts', 'FX risers', 'synth pad'],
        },
        'solo': {
            'pick': {'min': 0, 'max': 1},
            'chanceToInclude': 0.4,
            'items': ['solo soprano', 'duduk', 'cello', 'grand piano', 'celesta'],
        },
    },
    pool_order=['orchestra', 'percussion', 'hybrid', 'solo'],
    max_total=5,
    exclusion_rules=[
        ('braams', 'impacts'),
        ('taiko', 'timpani'),
    ],
    bpm={'min': 60, 'max': 140, 'typical': 90},
    moods=['Epic', 'Tense', 'Heroic', 'Sweeping', 'Ominous'],
)

GENRE_REGISTRY: Dict[str, SelectionDefinition] = {
    'ambient': AMBIENT_GENRE,
    'jazz': JAZZ_GENRE,
    'lofi': LOFI_GENRE,
    'trap': TRAP_GENRE,
    'rock': ROCK_GENRE,
    'electronic': ELECTRONIC_GENRE,
    'folk': FOLK_GENRE,
    'cinematic': CINEMATIC_GENRE,
}
