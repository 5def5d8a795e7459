"""Static instrument alias table.

Each entry names one canonical instrument, its registry category and the
free-form aliases that resolve to it. Aliases are matched case-insensitively,
so no alias may repeat (in any casing) across entries.
"""
from __future__ import annotations

from typing import Tuple

from style_engine.selection.registry import RegistryEntry

INSTRUMENT_REGISTRY: Tuple[RegistryEntry, ...] = (
    # Harmonic anchors
    RegistryEntry('prepared piano', 'harmonic', ('prepared piano',)),
    RegistryEntry('felt piano', 'harmonic', ('piano', 'keys', 'soft piano', 'muted piano')),
    RegistryEntry('grand piano', 'harmonic', ('concert grand', 'acoustic piano', 'grand')),
    RegistryEntry('honky tonk piano', 'harmonic', ('barroom piano', 'saloon piano', 'boogie piano')),
    RegistryEntry('harmonium', 'harmonic', ('pump organ',)),
    RegistryEntry('harpsichord', 'harmonic', ('cembalo',)),
    RegistryEntry('celesta', 'harmonic', ('celeste',)),
    RegistryEntry('strings', 'harmonic', ('string section', 'orchestral strings', 'string ensemble')),
    RegistryEntry('pizzicato strings', 'harmonic', ('pizz strings', 'plucked strings', 'staccato strings')),
    RegistryEntry('guitar', 'harmonic', ('electric guitar', 'clean guitar')),
    RegistryEntry('distorted guitar', 'harmonic', ('overdriven guitar', 'crunch guitar', 'high-gain guitar', 'distortion guitar', 'power chords')),
    RegistryEntry('Fender Stratocaster', 'harmonic', ('Stratocaster', 'Strat', 'Fender Strat', 'Strat guitar')),
    RegistryEntry('Telecaster', 'harmonic', ('Fender Telecaster', 'Tele', 'twangy guitar', 'twangy electric guitar')),
    RegistryEntry('hollowbody guitar', 'harmonic', ('semi-hollow guitar', 'archtop guitar', 'jazz guitar')),
    RegistryEntry('acoustic guitar', 'harmonic', ('folk guitar', 'steel string guitar')),
    RegistryEntry('nylon string guitar', 'harmonic', ('classical guitar', 'spanish guitar', 'nylon guitar')),
    RegistryEntry('slide guitar', 'harmonic', ('bottleneck guitar', 'bottleneck slide')),
    RegistryEntry('wah guitar', 'harmonic', ('wah-wah guitar', 'wah pedal guitar')),
    RegistryEntry('tremolo guitar', 'harmonic', ('tremolo picking', 'surf guitar')),
    RegistryEntry('fretless guitar', 'harmonic', ()),
    RegistryEntry('processed guitar', 'harmonic', ('ambient guitar', 'effected guitar')),
    RegistryEntry('e-bow guitar', 'harmonic', ('ebow guitar', 'e-bow', 'sustained guitar')),

    # Extended-range guitars (metal/modern)
    RegistryEntry('seven-string guitar', 'harmonic', ('7-string', '7 string guitar', '7-string electric')),
    RegistryEntry('eight-string guitar', 'harmonic', ('8-string', '8 string guitar', '8-string electric')),
    RegistryEntry('baritone guitar', 'harmonic', ('bari guitar', 'baritone electric')),

    # Folk Traditional
    RegistryEntry('hurdy gurdy', 'rare', ('hurdy-gurdy', 'wheel fiddle', 'vielle')),
    RegistryEntry('nyckelharpa', 'rare', ('keyed fiddle', 'swedish keyed fiddle')),
    RegistryEntry('concertina', 'color', ('english concertina', 'anglo concertina')),
    RegistryEntry('jaw harp', 'rare', ('jews harp', 'mouth harp', 'ozark harp')),

    # Country/Americana
    RegistryEntry('dobro', 'harmonic', ('resonator guitar', 'resophonic guitar', 'reso guitar')),
    RegistryEntry('lap steel guitar', 'harmonic', ('lap steel', 'hawaiian guitar', 'console steel')),
    RegistryEntry('autoharp', 'harmonic', ('auto harp', 'chord zither')),
    RegistryEntry('hammered dulcimer', 'harmonic', ('hammer dulcimer', 'cimbalom')),
    RegistryEntry('mountain dulcimer', 'harmonic', ('appalachian dulcimer', 'lap dulcimer')),
    RegistryEntry('washboard', 'movement', ('frottoir', 'rubboard')),

    # Pads and synths
    RegistryEntry('synth pad', 'pad', ('pad', 'pads', 'synth pads')),
    RegistryEntry('analog synth pads', 'pad', ('analog pads', 'warm pads')),
    RegistryEntry('analog synth', 'pad', ('analog synthesizer', 'analogue synth')),
    RegistryEntry('digital synth', 'pad', ('digital synthesizer',)),
    RegistryEntry('FM synth', 'pad', ('FM synthesis', 'DX7')),
    RegistryEntry('Moog synth', 'pad', ('Moog', 'Minimoog')),
    RegistryEntry('synth', 'pad', ('synthesizer', 'synths')),
    RegistryEntry('crystalline synth pads', 'pad', ('crystal pads', 'glassy pads')),
    RegistryEntry('ambient pad', 'pad', ('atmospheric pad', 'drone pad')),

    # Synth variants (workstation-inspired)
    RegistryEntry('synth strings', 'pad', ('string synth', 'synthetic strings')),
    RegistryEntry('synth brass', 'pad', ('brass synth', 'synthetic brass')),
    RegistryEntry('synth choir', 'pad', ('choir synth', 'vocal synth')),
    RegistryEntry('synth piano', 'pad', ('electric grand', 'synth keys')),
    RegistryEntry('synth flute', 'pad', ('FM flute', 'digital flute')),
    RegistryEntry('synth bells', 'pad', ('bell synth', 'FM bells', 'digital bells')),
    RegistryEntry('arpeggiator', 'pad', ('arp', 'arpeggiated synth', 'sequenced synth')),
    RegistryEntry('supersaw', 'pad', ('detuned supersaw', 'supersaws', 'stacked saws')),
    RegistryEntry('pluck synth', 'pad', ('pluck', 'synth pluck', 'plucky synth')),
    RegistryEntry('sidechain pad', 'pad', ('sidechained pad', 'pumping pad')),

    # Evolving textures (professional ambient)
    RegistryEntry('granular synth', 'pad', ('granular pad', 'grain synth')),
    RegistryEntry('wavetable synth', 'pad', ('wavetable pad', 'morphing synth')),
    RegistryEntry('modular synth', 'pad', ('modular synthesizer', 'eurorack')),
    RegistryEntry('tape loops', 'pad', ('tape loop', 'tape texture')),
    RegistryEntry('drone', 'pad', ('sustained drone', 'drone texture')),
    RegistryEntry('shimmer pad', 'pad', ('shimmer synth', 'shimmer reverb pad')),
    RegistryEntry('field recordings', 'pad', ('field recording', 'environmental sounds', 'nature sounds')),

    RegistryEntry('synth bass', 'movement', ('bass synth', 'synthetic bass')),
    RegistryEntry('808', 'movement', ('808 drums', 'TR-808', '808 kick', '808 sub bass', 'deep 808')),

    # Rare instruments
    RegistryEntry('taiko drums', 'rare', ('taiko', 'japanese drums')),
    RegistryEntry('steel pan', 'rare', ('steel drum', 'steelpan', 'steel drums')),
    RegistryEntry('Hammond organ', 'rare', ('Hammond', 'B3 organ')),
    RegistryEntry('organ', 'color', ('pipe organ', 'church organ')),
    RegistryEntry('mellotron', 'color', ('tape synth',)),
    RegistryEntry('theremin', 'rare', ()),
    RegistryEntry('waterphone', 'rare', ('ocean harp',)),
    RegistryEntry('glass armonica', 'rare', ('glass harmonica', 'armonica')),
    RegistryEntry('vocoder', 'rare', ('voice synth', 'robot voice')),
    RegistryEntry('harmonica', 'color', ('blues harp', 'mouth organ', 'harp harmonica')),
    RegistryEntry('accordion', 'color', ('squeezebox', 'button accordion')),
    RegistryEntry('mandolin', 'rare', ('mando',)),
    RegistryEntry('banjo', 'rare', ('5-string banjo',)),
    RegistryEntry('fiddle', 'color', ('country fiddle', 'bluegrass fiddle', 'folk fiddle')),
    RegistryEntry('pedal steel', 'color', ('pedal steel guitar', 'steel guitar')),
    RegistryEntry('tin whistle', 'color', ('penny whistle', 'irish whistle')),
    RegistryEntry('bouzouki', 'rare', ('greek bouzouki', 'irish bouzouki')),
    RegistryEntry('bandoneon', 'rare', ('bandonion', 'tango accordion')),
    RegistryEntry('timpani', 'movement', ('kettledrums', 'orchestral drums')),
    RegistryEntry('braams', 'rare', ('braam', 'trailer brass', 'epic brass hit')),
    RegistryEntry('impacts', 'rare', ('impact hits', 'cinematic impacts', 'trailer impacts')),
    RegistryEntry('FX risers', 'rare', ('risers', 'build ups', 'tension risers')),
    RegistryEntry('vinyl noise', 'rare', ('vinyl crackle', 'lo-fi texture', 'record noise')),

    # Reggae/Dub instruments
    RegistryEntry('melodica', 'color', ('blow organ', 'keyboard harmonica')),
    RegistryEntry('nyabinghi drums', 'movement', ('rasta drums', 'nyabinghi')),
    RegistryEntry('spring reverb', 'rare', ('dub reverb', 'spring tank')),
    RegistryEntry('tape delay', 'rare', ('dub delay', 'analog delay')),
    RegistryEntry('dub siren', 'rare', ('siren', 'dub fx')),

    # African instruments
    RegistryEntry('talking drum', 'color', ('yoruba drum', 'dundun')),
    RegistryEntry('shekere', 'movement', ('shaker gourd', 'gourd shaker')),
    RegistryEntry('kora', 'color', ('african harp', 'kora harp')),
    RegistryEntry('balafon', 'color', ('african xylophone', 'balaphon')),
    RegistryEntry('log drums', 'movement', ('log drum', 'amapiano drums')),

    # Hyperpop instruments
    RegistryEntry('pitched vocals', 'color', ('pitched voice', 'chipmunk vocals', 'vocal pitch')),
    RegistryEntry('bitcrushed synth', 'pad', ('crushed synth', 'lo-fi synth', '8-bit synth')),
    RegistryEntry('glitched vocals', 'rare', ('vocal glitch', 'chopped vocals')),
    RegistryEntry('distorted 808', 'movement', ('clipped 808', 'saturated 808')),

    # Drill instruments
    RegistryEntry('sliding 808', 'movement', ('gliding 808', 'portamento bass')),
    RegistryEntry('drill hi hats', 'movement', ('triplet hi hats', 'rapid hi hats')),
    RegistryEntry('dark piano', 'harmonic', ('minor piano', 'ominous piano')),

    # Color instruments
    RegistryEntry('electric piano', 'color', ('e-piano', 'epiano')),
    RegistryEntry('Rhodes', 'color', ('Fender Rhodes', 'Rhodes piano')),
    RegistryEntry('Wurlitzer', 'color', ('Wurly', 'Wurlitzer piano')),
    RegistryEntry('Clavinet', 'color', ('Clav',)),
    RegistryEntry('cello', 'color', ('violoncello',)),
    RegistryEntry('violin', 'color', ('violins',)),
    RegistryEntry('viola', 'color', ('violas',)),
    RegistryEntry('vibraphone', 'color', ('vibes', 'vibraharp')),
    RegistryEntry('oboe', 'color', ()),
    RegistryEntry('english horn', 'color', ('cor anglais',)),
    RegistryEntry('bassoon', 'color', ()),
    RegistryEntry('contrabassoon', 'color', ('contra bassoon', 'double bassoon')),
    RegistryEntry('bowed vibraphone', 'color', ()),
    RegistryEntry('marimba', 'color', ()),
    RegistryEntry('kalimba', 'color', ('thumb piano', 'mbira')),
    RegistryEntry('glockenspiel', 'color', ('glock', 'orchestra bells')),
    RegistryEntry('bells', 'color', ('bell', 'chimes')),
    RegistryEntry('glass bells', 'color', ('crystal bells',)),
    RegistryEntry('congas', 'color', ('conga', 'conga drums')),
    RegistryEntry('singing bowls', 'color', ('tibetan bowls', 'meditation bowls')),
    RegistryEntry('choir', 'color', ('vocals', 'voices', 'choral', 'SATB choir', 'mixed choir')),
    RegistryEntry('wordless choir', 'color', ('aahs', 'oohs', 'vocal pads')),
    RegistryEntry('solo soprano', 'color', ('soprano soloist', 'soprano voice')),
    RegistryEntry('clarinet', 'color', ()),
    RegistryEntry('bass clarinet', 'color', ('bass clari',)),
    RegistryEntry('piccolo', 'color', ('piccolo flute',)),
    RegistryEntry('shakuhachi', 'color', ('japanese flute',)),
    RegistryEntry('duduk', 'color', ('armenian duduk',)),
    RegistryEntry('bansuri', 'color', ('indian flute', 'bamboo flute')),
    RegistryEntry('koto', 'color', ('japanese koto',)),
    RegistryEntry('erhu', 'color', ('chinese violin', 'chinese fiddle')),
    RegistryEntry('sitar', 'color', ()),
    RegistryEntry('oud', 'color', ('arabic oud',)),
    RegistryEntry('tongue drum', 'color', ('steel tongue drum', 'tank drum')),
    RegistryEntry('crystal bowls', 'color', ('crystal singing bowls', 'quartz bowls')),
    RegistryEntry('breathy EWI', 'color', ('EWI', 'wind controller')),
    RegistryEntry('flute', 'color', ('concert flute', 'western flute')),
    RegistryEntry('harp', 'color', ('concert harp', 'pedal harp')),
    RegistryEntry('trumpet', 'color', ('brass trumpet',)),
    RegistryEntry('muted trumpet', 'color', ('harmon mute trumpet', 'wah-wah trumpet')),
    RegistryEntry('saxophone', 'color', ('sax',)),
    RegistryEntry('tenor sax', 'color', ('tenor saxophone',)),
    RegistryEntry('alto sax', 'color', ('alto saxophone',)),
    RegistryEntry('soprano sax', 'color', ('soprano saxophone',)),
    RegistryEntry('baritone saxophone', 'color', ('bari sax', 'baritone sax')),
    RegistryEntry('flugelhorn', 'color', ('flugel', 'fluegel horn')),
    RegistryEntry('french horn', 'color', ('horn', 'horns')),
    RegistryEntry('trombone', 'color', ()),
    RegistryEntry('bass trombone', 'color', ()),
    RegistryEntry('tuba', 'color', ('bass tuba', 'concert tuba')),
    RegistryEntry('low brass', 'color', ('brass section', 'horn section', 'horn stabs')),
    RegistryEntry('string ostinato', 'color', ('ostinato strings', 'driving strings')),
    RegistryEntry('orchestra', 'color', ('full orchestra', 'orchestral')),

    # Movement instruments
    RegistryEntry('percussion', 'movement', ('perc',)),
    RegistryEntry('toms', 'movement', ('tom drums', 'floor toms')),
    RegistryEntry('shaker', 'movement', ('shakers', 'egg shaker')),
    RegistryEntry('rain stick', 'movement', ('rainstick',)),
    RegistryEntry('ocean drum', 'movement', ('sea drum', 'wave drum')),
    RegistryEntry('frame drum', 'movement', ('bodhran', 'tar')),
    RegistryEntry('handpan', 'movement', ('hang drum', 'hang')),
    RegistryEntry('sub-bass', 'movement', ('sub bass', 'subbass', 'deep bass')),
    RegistryEntry('snare drum', 'movement', ('snare', 'snappy snare')),
    RegistryEntry('jazz brushes', 'movement', ('brushes', 'brush drums', 'brushed drums', 'brush kit')),
    RegistryEntry('cajón', 'movement', ('cajon', 'box drum')),
    RegistryEntry('djembe', 'movement', ('djembe drum',)),
    RegistryEntry('doumbek', 'movement', ('darbuka', 'goblet drum')),
    RegistryEntry('surdo', 'movement', ('Brazilian bass drum',)),
    RegistryEntry('bass', 'movement', ('bass guitar', 'electric bass', 'round bass')),
    RegistryEntry('slap bass', 'movement', ('slapped bass', 'funk bass')),
    RegistryEntry('walking bass', 'movement', ('walking bass line',)),
    RegistryEntry('picked bass', 'movement', ('punk bass',)),
    RegistryEntry('upright bass', 'movement', ('contrabass', 'double bass', 'acoustic bass', 'standup bass')),
    RegistryEntry('bongos', 'movement', ('bongo drums',)),
    RegistryEntry('timbales', 'movement', ('timbale',)),
    RegistryEntry('claves', 'movement', ('clave',)),
    RegistryEntry('woodblock', 'movement', ('wood block',)),
    RegistryEntry('castanet', 'movement', ('castanets', 'palmas')),
    RegistryEntry('tambourine', 'movement', ('tamb',)),
    RegistryEntry('handclaps', 'movement', ('claps', 'hand claps', 'clapping')),
    RegistryEntry('finger snaps', 'movement', ('snaps', 'finger snap')),
    RegistryEntry('ride cymbal', 'movement', ('ride', 'jazz ride')),
    RegistryEntry('suspended cymbal', 'movement', ('sus cymbal', 'hanging cymbal')),
    RegistryEntry('crash cymbal', 'movement', ('piatti', 'crash')),
    RegistryEntry('tam tam', 'movement', ('gong', 'orchestral gong')),
    RegistryEntry('mark tree', 'movement', ('bar chimes', 'wind chimes', 'chime tree')),
    RegistryEntry('orchestral bass drum', 'movement', ('concert bass drum', 'gran cassa')),
    RegistryEntry('drums', 'movement', ('drum kit', 'drumkit', 'drum set', 'live drums')),
    RegistryEntry('hi-hat', 'movement', ('hi-hats', 'hihat', 'hihats')),
    RegistryEntry('trap hi hats', 'movement', ('rolling hi hats', 'trap hats', 'stuttering hi hats')),
    RegistryEntry('kick drum', 'movement', ('kick', 'bass drum', 'four on the floor')),

    # World/Ethnic Instruments
    RegistryEntry('tabla', 'movement', ('indian drums', 'tabla drums')),
    RegistryEntry('dholak', 'movement', ('dholki', 'two-headed drum')),
    RegistryEntry('santoor', 'color', ('santur', 'santour', 'persian dulcimer')),
    RegistryEntry('sarod', 'color', ('sarod lute',)),
    RegistryEntry('didgeridoo', 'rare', ('didge', 'yidaki', 'drone pipe')),
    RegistryEntry('udu drum', 'movement', ('udu', 'clay pot drum', 'water pot')),
    RegistryEntry('ogene', 'movement', ('iron bell', 'igbo bell')),

    # Electronic/Production
    RegistryEntry('TR-909', 'movement', ('909', 'Roland 909', 'nine-oh-nine')),
    RegistryEntry('TB-303', 'movement', ('303', 'acid bass', 'acid synth', 'Roland 303')),
    RegistryEntry('talkbox', 'rare', ('talk box', 'voice box')),
    RegistryEntry('Linn drum', 'movement', ('LinnDrum', 'LM-1')),

    # Latin Percussion
    RegistryEntry('guiro', 'movement', ('scraper', 'guira', 'güiro')),
    RegistryEntry('cuica', 'movement', ('cuíca', 'friction drum', 'laughing drum')),
    RegistryEntry('agogo bells', 'movement', ('agogo', 'agogô', 'double bells')),
    RegistryEntry('cowbell', 'movement', ('cencerro', 'campana', 'cha-cha bell')),
    RegistryEntry('cabasa', 'movement', ('afuche', 'afuché')),
    RegistryEntry('pandeiro', 'movement', ('brazilian tambourine', 'pandero')),
    RegistryEntry('maracas', 'movement', ('rumba shakers',)),
    RegistryEntry('repinique', 'movement', ('repique', 'repi')),
)
