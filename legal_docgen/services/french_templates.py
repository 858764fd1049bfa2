"""Built-in French legal document templates

Bodies use a small placeholder grammar:
  {{field}}                      answer for field
  {{#field}}...{{/field}}        kept when field is truthy
  {{^field}}...{{/field}}        kept when field is falsy
  {{#eq field "v"}}...{{/eq}}    kept when field == "v"
  {{#ne field "v"}}...{{/ne}}    kept when field != "v"
"""

# Templates in registration order
FRENCH_LEGAL_TEMPLATES = [
    # CONTRAT DE TRAVAIL CDI
    {
        'id': 'contrat-travail-cdi',
        'name': 'Contrat de Travail CDI',
        'description': 'Contrat à durée indéterminée conforme au Code du travail français',
        'category': 'contrat',
        'legal_basis': 'Code du travail français - Articles L1221-1 et suivants',
        'estimated_time': '10-15 minutes',
        'required_fields': ['employeur_nom', 'salarie_nom', 'poste', 'salaire', 'date_embauche'],
        'optional_fields': ['periode_essai', 'formation', 'clauses_particulieres'],
        'legal_notices': [
            'Ce contrat doit respecter les dispositions du Code du travail',
            "Les mentions obligatoires sont définies par l'article L1221-1",
            'Le contrat peut être complété par une convention collective applicable',
        ],
        'questions': [
            # Employeur
            {
                'id': 'employeur_nom',
                'text': "Quel est le nom de l'employeur ou de l'entreprise ?",
                'type': 'text',
                'required': True,
                'placeholder': 'Ex: SARL Solutions Numériques',
                'help_text': "Nom complet de l'entreprise ou raison sociale",
            },
            {
                'id': 'employeur_siret',
                'text': "Numéro SIRET de l'entreprise (optionnel)",
                'type': 'text',
                'required': False,
                'placeholder': 'Ex: 123 456 789 01234',
                'validation': {
                    'pattern': r'^[0-9]{3}\s?[0-9]{3}\s?[0-9]{3}\s?[0-9]{5}$',
                    'message': 'Format SIRET invalide (14 chiffres)',
                },
            },
            {
                'id': 'employeur_adresse',
                'text': "Adresse complète de l'employeur",
                'type': 'textarea',
                'required': True,
                'placeholder': 'Adresse, code postal, ville',
                'help_text': "Adresse du siège social ou de l'établissement",
            },
            # Salarié
            {
                'id': 'salarie_nom',
                'text': 'Nom et prénom du salarié',
                'type': 'text',
                'required': True,
                'placeholder': 'Ex: Dupont Jean',
                'help_text': 'Nom et prénom complets du futur employé',
            },
            {
                'id': 'salarie_adresse',
                'text': 'Adresse du salarié',
                'type': 'textarea',
                'required': True,
                'placeholder': 'Adresse, code postal, ville',
            },
            # Poste et mission
            {
                'id': 'poste',
                'text': 'Intitulé du poste ou de la fonction',
                'type': 'text',
                'required': True,
                'placeholder': 'Ex: Développeur Full-Stack',
                'help_text': 'Titre précis du poste à occuper',
            },
            {
                'id': 'mission_description',
                'text': 'Description des tâches principales (optionnel)',
                'type': 'textarea',
                'required': False,
                'placeholder': 'Décrivez les principales missions et responsabilités...',
            },
            {
                'id': 'lieu_travail',
                'text': 'Lieu de travail',
                'type': 'text',
                'required': True,
                'placeholder': 'Ex: Paris 15ème, télétravail partiel...',
            },
            # Conditions de travail
            {
                'id': 'date_embauche',
                'text': "Date d'embauche prévue",
                'type': 'date',
                'required': True,
                'help_text': 'Date de prise de poste effective',
            },
            {
                'id': 'salaire',
                'text': 'Salaire brut mensuel (en euros)',
                'type': 'number',
                'required': True,
                'placeholder': 'Ex: 3500',
                'help_text': 'Montant du salaire brut mensuel',
            },
            {
                'id': 'horaires',
                'text': 'Horaires de travail',
                'type': 'select',
                'required': True,
                'options': [
                    {'value': '35h', 'label': '35 heures par semaine'},
                    {'value': '39h', 'label': '39 heures par semaine'},
                    {'value': 'cadre', 'label': 'Statut cadre (forfait jours)'},
                    {'value': 'autre', 'label': 'Autre (à préciser)'},
                ],
            },
            {
                'id': 'horaires_details',
                'text': 'Précisez les horaires si "Autre" sélectionné',
                'type': 'text',
                'required': False,
                'depends_on': 'horaires',
                'placeholder': 'Ex: 9h-17h, télétravail 2 jours...',
            },
            # Période d'essai
            {
                'id': 'periode_essai',
                'text': "Souhaitez-vous inclure une période d'essai ?",
                'type': 'boolean',
                'required': False,
                'help_text': "La période d'essai est optionnelle mais recommandée",
            },
            {
                'id': 'duree_essai',
                'text': "Durée de la période d'essai",
                'type': 'select',
                'required': False,
                'depends_on': 'periode_essai',
                'options': [
                    {'value': '2_mois', 'label': '2 mois (employés)'},
                    {'value': '3_mois', 'label': '3 mois (agents de maîtrise)'},
                    {'value': '4_mois', 'label': '4 mois (cadres)'},
                ],
            },
            # Clauses spéciales
            {
                'id': 'formation',
                'text': 'Obligations de formation particulières (optionnel)',
                'type': 'textarea',
                'required': False,
                'placeholder': 'Formations obligatoires, certifications...',
            },
            {
                'id': 'clauses_particulieres',
                'text': 'Clauses particulières à ajouter (optionnel)',
                'type': 'textarea',
                'required': False,
                'placeholder': 'Clause de mobilité, de confidentialité, avantages...',
            },
        ],
        'document_body': '''
CONTRAT DE TRAVAIL À DURÉE INDÉTERMINÉE

Entre les soussignés :

L'EMPLOYEUR :
{{employeur_nom}}
{{#employeur_siret}}SIRET : {{employeur_siret}}{{/employeur_siret}}
Adresse : {{employeur_adresse}}

ci-après dénommé "l'Employeur", d'une part,

ET

LE SALARIÉ :
{{salarie_nom}}
Adresse : {{salarie_adresse}}

ci-après dénommé "le Salarié", d'autre part,

IL EST CONVENU CE QUI SUIT :

ARTICLE 1 - ENGAGEMENT
L'Employeur engage le Salarié en qualité de {{poste}}.
{{#mission_description}}
Missions principales : {{mission_description}}
{{/mission_description}}

ARTICLE 2 - LIEU DE TRAVAIL
Le Salarié exercera ses fonctions à : {{lieu_travail}}.

ARTICLE 3 - PRISE D'EFFET ET DURÉE
Le présent contrat prendra effet le {{date_embauche}} pour une durée indéterminée.

{{#periode_essai}}
ARTICLE 4 - PÉRIODE D'ESSAI
Le présent contrat est assorti d'une période d'essai de {{duree_essai}}, au cours de laquelle chacune des parties peut rompre le contrat sans préavis ni indemnité.
{{/periode_essai}}

ARTICLE {{#periode_essai}}5{{/periode_essai}}{{^periode_essai}}4{{/periode_essai}} - RÉMUNÉRATION
Le Salarié percevra une rémunération brute mensuelle de {{salaire}} euros, payable le dernier jour ouvrable de chaque mois.

ARTICLE {{#periode_essai}}6{{/periode_essai}}{{^periode_essai}}5{{/periode_essai}} - DURÉE DU TRAVAIL
La durée du travail est fixée à {{horaires}}.
{{#horaires_details}}
Modalités : {{horaires_details}}
{{/horaires_details}}

{{#formation}}
ARTICLE {{#periode_essai}}7{{/periode_essai}}{{^periode_essai}}6{{/periode_essai}} - FORMATION
{{formation}}
{{/formation}}

{{#clauses_particulieres}}
ARTICLE {{#periode_essai}}{{#formation}}8{{/formation}}{{^formation}}7{{/formation}}{{/periode_essai}}{{^periode_essai}}{{#formation}}7{{/formation}}{{^formation}}6{{/formation}}{{/periode_essai}} - CLAUSES PARTICULIÈRES
{{clauses_particulieres}}
{{/clauses_particulieres}}

ARTICLE FINAL - DISPOSITIONS GÉNÉRALES
Le présent contrat est régi par le Code du travail et les conventions collectives applicables. Toute modification devra faire l'objet d'un avenant écrit.

Fait en deux exemplaires à __________________, le __________________

L'Employeur                           Le Salarié
(signature et cachet)                 (signature précédée de "Lu et approuvé")
''',
    },

    # BAIL D'HABITATION
    {
        'id': 'bail-habitation',
        'name': "Bail d'Habitation",
        'description': 'Contrat de location pour logement vide ou meublé',
        'category': 'bail',
        'legal_basis': 'Loi du 6 juillet 1989 - Article 3 et suivants',
        'estimated_time': '15-20 minutes',
        'required_fields': ['proprietaire_nom', 'locataire_nom', 'logement_adresse', 'loyer', 'date_effet'],
        'optional_fields': ['charges', 'depot_garantie', 'travaux', 'clauses_particulieres'],
        'legal_notices': [
            'Ce bail respecte la loi du 6 juillet 1989',
            'Le contrat doit être écrit et signé par les deux parties',
            "L'état des lieux d'entrée est obligatoire",
        ],
        'questions': [
            {
                'id': 'type_location',
                'text': 'Type de location',
                'type': 'select',
                'required': True,
                'options': [
                    {'value': 'vide', 'label': 'Location vide'},
                    {'value': 'meuble', 'label': 'Location meublée'},
                ],
                'help_text': 'Une location meublée a des règles différentes',
            },
            # Propriétaire
            {
                'id': 'proprietaire_nom',
                'text': 'Nom complet du propriétaire',
                'type': 'text',
                'required': True,
                'placeholder': 'Ex: Martin Sophie',
            },
            {
                'id': 'proprietaire_adresse',
                'text': 'Adresse du propriétaire',
                'type': 'textarea',
                'required': True,
                'placeholder': 'Adresse complète du propriétaire',
            },
            # Locataire
            {
                'id': 'locataire_nom',
                'text': 'Nom complet du locataire',
                'type': 'text',
                'required': True,
                'placeholder': 'Ex: Dupont Pierre',
            },
            # Logement
            {
                'id': 'logement_adresse',
                'text': 'Adresse complète du logement loué',
                'type': 'textarea',
                'required': True,
                'placeholder': "Adresse, étage, code d'accès...",
            },
            {
                'id': 'logement_description',
                'text': 'Description du logement',
                'type': 'textarea',
                'required': True,
                'placeholder': 'Nombre de pièces, superficie, équipements...',
                'help_text': 'Décrivez précisément le logement et ses équipements',
            },
            {
                'id': 'superficie',
                'text': 'Surface habitable (en m²)',
                'type': 'number',
                'required': True,
                'placeholder': 'Ex: 45.5',
            },
            {
                'id': 'classe_energetique',
                'text': 'Classe énergétique (DPE)',
                'type': 'select',
                'required': False,
                'options': [
                    {'value': 'A', 'label': 'A (très économe)'},
                    {'value': 'B', 'label': 'B (économe)'},
                    {'value': 'C', 'label': 'C (assez économe)'},
                    {'value': 'D', 'label': 'D (assez peu économe)'},
                    {'value': 'E', 'label': 'E (peu économe)'},
                    {'value': 'F', 'label': 'F (très peu économe)'},
                    {'value': 'G', 'label': 'G (extrêmement peu économe)'},
                ],
            },
            # Conditions financières
            {
                'id': 'date_effet',
                'text': "Date de prise d'effet du bail",
                'type': 'date',
                'required': True,
            },
            {
                'id': 'duree_bail',
                'text': 'Durée du bail',
                'type': 'select',
                'required': True,
                'options': [
                    {'value': '3_ans', 'label': '3 ans (location vide)'},
                    {'value': '1_an', 'label': '1 an (location meublée)'},
                    {'value': '9_mois', 'label': '9 mois (étudiant meublé)'},
                ],
            },
            {
                'id': 'loyer',
                'text': 'Montant du loyer mensuel (en euros)',
                'type': 'number',
                'required': True,
                'placeholder': 'Ex: 850',
            },
            {
                'id': 'charges',
                'text': 'Charges mensuelles (en euros)',
                'type': 'number',
                'required': False,
                'placeholder': 'Ex: 120',
                'help_text': 'Charges forfaitaires ou provisionnelles',
            },
            {
                'id': 'depot_garantie',
                'text': 'Dépôt de garantie (en euros)',
                'type': 'number',
                'required': False,
                'placeholder': 'Ex: 850',
                'help_text': 'Maximum 1 mois de loyer (vide) ou 2 mois (meublé)',
            },
            {
                'id': 'modalite_paiement',
                'text': 'Modalités de paiement du loyer',
                'type': 'text',
                'required': True,
                'placeholder': 'Ex: Virement le 5 de chaque mois',
            },
            # Travaux et état
            {
                'id': 'travaux',
                'text': 'Travaux récents effectués (optionnel)',
                'type': 'textarea',
                'required': False,
                'placeholder': 'Nature et date des travaux...',
            },
            {
                'id': 'clauses_particulieres',
                'text': 'Clauses particulières (optionnel)',
                'type': 'textarea',
                'required': False,
                'placeholder': 'Animaux, sous-location, révision du loyer...',
            },
        ],
        'document_body': '''
CONTRAT DE BAIL D'HABITATION {{#type_location}}{{#eq type_location "meuble"}}MEUBLÉE{{/eq}}{{#eq type_location "vide"}}VIDE{{/eq}}{{/type_location}}

Entre les soussignés :

LE BAILLEUR :
{{proprietaire_nom}}
Adresse : {{proprietaire_adresse}}

ci-après dénommé "le Bailleur", d'une part,

ET

LE PRENEUR :
{{locataire_nom}}

ci-après dénommé "le Preneur", d'autre part,

IL EST CONVENU CE QUI SUIT :

ARTICLE 1 - OBJET DE LA LOCATION
Le Bailleur loue au Preneur le logement situé :
{{logement_adresse}}

Description : {{logement_description}}
Surface habitable : {{superficie}} m²
{{#classe_energetique}}Classe énergétique : {{classe_energetique}}{{/classe_energetique}}

ARTICLE 2 - DURÉE DU BAIL
Le présent bail est consenti pour une durée de {{duree_bail}}, prenant effet le {{date_effet}}.

ARTICLE 3 - LOYER ET CHARGES
Le montant du loyer mensuel est fixé à {{loyer}} euros.
{{#charges}}
Les charges mensuelles s'élèvent à {{charges}} euros.
{{/charges}}

Le loyer {{#charges}}et les charges {{/charges}}sont payables {{modalite_paiement}}.

{{#depot_garantie}}
ARTICLE 4 - DÉPÔT DE GARANTIE
Le Preneur verse à titre de dépôt de garantie la somme de {{depot_garantie}} euros.
{{/depot_garantie}}

{{#travaux}}
ARTICLE {{#depot_garantie}}5{{/depot_garantie}}{{^depot_garantie}}4{{/depot_garantie}} - TRAVAUX
Travaux récents : {{travaux}}
{{/travaux}}

{{#clauses_particulieres}}
ARTICLE {{#depot_garantie}}{{#travaux}}6{{/travaux}}{{^travaux}}5{{/travaux}}{{/depot_garantie}}{{^depot_garantie}}{{#travaux}}5{{/travaux}}{{^travaux}}4{{/travaux}}{{/depot_garantie}} - CLAUSES PARTICULIÈRES
{{clauses_particulieres}}
{{/clauses_particulieres}}

ARTICLE FINAL - DISPOSITIONS GÉNÉRALES
Le présent bail est soumis à la loi du 6 juillet 1989. Un état des lieux contradictoire sera établi lors de la remise des clés.

Fait en deux exemplaires à __________________, le __________________

Le Bailleur                           Le Preneur
(signature)                           (signature précédée de "Lu et approuvé")
''',
    },

    # CONTRAT DE VENTE
    {
        'id': 'contrat-vente',
        'name': 'Contrat de Vente',
        'description': 'Contrat de vente de biens ou services',
        'category': 'vente',
        'legal_basis': 'Code civil - Articles 1582 et suivants',
        'estimated_time': '10-15 minutes',
        'required_fields': ['vendeur_nom', 'acheteur_nom', 'objet_vente', 'prix'],
        'optional_fields': ['modalite_paiement', 'frais_livraison', 'garantie_conformite'],
        'legal_notices': [
            "Le contrat doit préciser l'objet, le prix et le consentement",
            "Les garanties légales s'appliquent automatiquement",
            'Droit de rétractation selon le contexte',
        ],
        'questions': [
            # Vendeur
            {
                'id': 'vendeur_nom',
                'text': 'Nom complet du vendeur',
                'type': 'text',
                'required': True,
                'placeholder': "Nom du vendeur ou de l'entreprise",
            },
            {
                'id': 'vendeur_adresse',
                'text': 'Adresse du vendeur',
                'type': 'textarea',
                'required': True,
            },
            {
                'id': 'vendeur_siret',
                'text': 'SIRET du vendeur (si professionnel)',
                'type': 'text',
                'required': False,
                'placeholder': 'Numéro SIRET',
                'validation': {
                    'pattern': r'^[0-9]{3}\s?[0-9]{3}\s?[0-9]{3}\s?[0-9]{5}$',
                    'message': 'Format SIRET invalide (14 chiffres)',
                },
            },
            # Acheteur
            {
                'id': 'acheteur_nom',
                'text': "Nom complet de l'acheteur",
                'type': 'text',
                'required': True,
            },
            {
                'id': 'acheteur_adresse',
                'text': "Adresse de l'acheteur",
                'type': 'textarea',
                'required': True,
            },
            # Objet de la vente
            {
                'id': 'objet_vente',
                'text': "Description détaillée de l'objet de la vente",
                'type': 'textarea',
                'required': True,
                'placeholder': 'Décrivez précisément les biens ou services vendus...',
                'help_text': 'Soyez le plus précis possible sur les caractéristiques',
                'validation': {
                    'min_length': 10,
                    'max_length': 2000,
                },
            },
            # Prix et paiement
            {
                'id': 'prix',
                'text': 'Prix de vente total (en euros)',
                'type': 'number',
                'required': True,
                'placeholder': 'Ex: 15000',
            },
            {
                'id': 'modalite_paiement',
                'text': 'Modalités de paiement',
                'type': 'select',
                'required': True,
                'options': [
                    {'value': 'comptant', 'label': 'Paiement comptant'},
                    {'value': 'echeance', 'label': 'Paiement échelonné'},
                    {'value': 'livraison', 'label': 'Paiement à la livraison'},
                ],
            },
            {
                'id': 'echeancier',
                'text': "Détails de l'échéancier (si paiement échelonné)",
                'type': 'textarea',
                'required': False,
                'depends_on': 'modalite_paiement',
                'placeholder': 'Dates et montants des échéances...',
            },
            # Livraison
            {
                'id': 'livraison_lieu',
                'text': 'Lieu de livraison',
                'type': 'text',
                'required': True,
                'placeholder': 'Adresse de livraison ou retrait',
            },
            {
                'id': 'livraison_delai',
                'text': 'Délai de livraison',
                'type': 'text',
                'required': True,
                'placeholder': 'Ex: 15 jours ouvrables',
            },
            {
                'id': 'frais_livraison',
                'text': 'Frais de livraison (optionnel)',
                'type': 'text',
                'required': False,
                'placeholder': 'À la charge de qui, montant...',
            },
            # Garanties
            {
                'id': 'garantie_conformite',
                'text': 'Précisions sur la garantie de conformité',
                'type': 'textarea',
                'required': False,
                'placeholder': 'Garanties particulières offertes...',
            },
            {
                'id': 'clauses_particulieres',
                'text': 'Clauses particulières',
                'type': 'textarea',
                'required': False,
                'placeholder': 'Conditions particulières, pénalités...',
            },
        ],
        'document_body': '''
CONTRAT DE VENTE

Entre les soussignés :

LE VENDEUR :
{{vendeur_nom}}
{{#vendeur_siret}}SIRET : {{vendeur_siret}}{{/vendeur_siret}}
Adresse : {{vendeur_adresse}}

ci-après dénommé "le Vendeur", d'une part,

ET

L'ACHETEUR :
{{acheteur_nom}}
Adresse : {{acheteur_adresse}}

ci-après dénommé "l'Acheteur", d'autre part,

IL EST CONVENU CE QUI SUIT :

ARTICLE 1 - OBJET DE LA VENTE
Le Vendeur vend à l'Acheteur :
{{objet_vente}}

ARTICLE 2 - PRIX
Le prix de vente est fixé à {{prix}} euros.

ARTICLE 3 - MODALITÉS DE PAIEMENT
{{#eq modalite_paiement "comptant"}}Le paiement s'effectuera comptant à la signature du présent contrat.{{/eq}}
{{#eq modalite_paiement "livraison"}}Le paiement s'effectuera à la livraison.{{/eq}}
{{#eq modalite_paiement "echeance"}}Le paiement s'effectuera selon l'échéancier suivant :
{{echeancier}}{{/eq}}

ARTICLE 4 - LIVRAISON
La livraison aura lieu à : {{livraison_lieu}}
Délai de livraison : {{livraison_delai}}
{{#frais_livraison}}Frais de livraison : {{frais_livraison}}{{/frais_livraison}}

{{#garantie_conformite}}
ARTICLE 5 - GARANTIES
{{garantie_conformite}}
{{/garantie_conformite}}

{{#clauses_particulieres}}
ARTICLE {{#garantie_conformite}}6{{/garantie_conformite}}{{^garantie_conformite}}5{{/garantie_conformite}} - CLAUSES PARTICULIÈRES
{{clauses_particulieres}}
{{/clauses_particulieres}}

ARTICLE FINAL - DISPOSITIONS GÉNÉRALES
Le présent contrat est régi par le Code civil français. Les garanties légales s'appliquent de plein droit.

Fait en deux exemplaires à __________________, le __________________

Le Vendeur                            L'Acheteur
(signature)                           (signature précédée de "Lu et approuvé")
''',
    },

    # PROCURATION
    {
        'id': 'procuration',
        'name': 'Procuration (Mandat)',
        'description': 'Mandat de représentation pour démarches administratives ou judiciaires',
        'category': 'procuration',
        'legal_basis': 'Code civil - Articles 1984 et suivants / Code de procédure civile',
        'estimated_time': '5-10 minutes',
        'required_fields': ['mandant_nom', 'mandataire_nom', 'objet_mandat'],
        'optional_fields': ['duree_mandat', 'conditions_fin'],
        'legal_notices': [
            'La procuration doit être écrite et datée',
            "Joindre une copie des pièces d'identité",
            'Certaines démarches nécessitent une procuration notariée',
        ],
        'questions': [
            {
                'id': 'type_procuration',
                'text': 'Type de procuration',
                'type': 'select',
                'required': True,
                'options': [
                    {'value': 'administrative', 'label': 'Démarches administratives'},
                    {'value': 'judiciaire', 'label': 'Représentation judiciaire'},
                    {'value': 'bancaire', 'label': 'Opérations bancaires'},
                    {'value': 'autre', 'label': 'Autre (à préciser)'},
                ],
            },
            # Mandant
            {
                'id': 'mandant_nom',
                'text': 'Nom et prénom du mandant',
                'type': 'text',
                'required': True,
                'placeholder': 'Personne qui donne la procuration',
                'help_text': "Personne qui donne le pouvoir d'agir en son nom",
            },
            {
                'id': 'mandant_naissance',
                'text': 'Date et lieu de naissance du mandant',
                'type': 'text',
                'required': True,
                'placeholder': 'Ex: 15/03/1980 à Paris',
            },
            {
                'id': 'mandant_nationalite',
                'text': 'Nationalité du mandant',
                'type': 'text',
                'required': True,
                'placeholder': 'Ex: Française',
            },
            {
                'id': 'mandant_profession',
                'text': 'Profession du mandant',
                'type': 'text',
                'required': False,
                'placeholder': 'Ex: Ingénieur',
            },
            {
                'id': 'mandant_adresse',
                'text': 'Adresse complète du mandant',
                'type': 'textarea',
                'required': True,
            },
            # Mandataire
            {
                'id': 'mandataire_nom',
                'text': 'Nom et prénom du mandataire',
                'type': 'text',
                'required': True,
                'placeholder': 'Personne qui recevra la procuration',
                'help_text': 'Personne habilitée à agir au nom du mandant',
            },
            {
                'id': 'mandataire_naissance',
                'text': 'Date et lieu de naissance du mandataire',
                'type': 'text',
                'required': True,
                'placeholder': 'Ex: 22/07/1975 à Lyon',
            },
            {
                'id': 'mandataire_nationalite',
                'text': 'Nationalité du mandataire',
                'type': 'text',
                'required': True,
                'placeholder': 'Ex: Française',
            },
            {
                'id': 'mandataire_profession',
                'text': 'Profession du mandataire',
                'type': 'text',
                'required': False,
                'placeholder': 'Ex: Avocat',
            },
            {
                'id': 'mandataire_adresse',
                'text': 'Adresse complète du mandataire',
                'type': 'textarea',
                'required': True,
            },
            # Objet du mandat
            {
                'id': 'objet_mandat',
                'text': 'Objet précis de la procuration',
                'type': 'textarea',
                'required': True,
                'placeholder': 'Décrivez précisément les actes que le mandataire est autorisé à accomplir...',
                'help_text': 'Soyez très précis sur les pouvoirs accordés',
            },
            {
                'id': 'tribunal_concerne',
                'text': 'Tribunal concerné (si procuration judiciaire)',
                'type': 'text',
                'required': False,
                'depends_on': 'type_procuration',
                'placeholder': 'Ex: Tribunal judiciaire de Paris',
            },
            {
                'id': 'numero_procedure',
                'text': 'Numéro de procédure (si connu)',
                'type': 'text',
                'required': False,
                'depends_on': 'tribunal_concerne',
                'placeholder': "Référence de l'affaire",
            },
            # Durée et conditions
            {
                'id': 'duree_mandat',
                'text': 'Durée du mandat',
                'type': 'select',
                'required': False,
                'options': [
                    {'value': 'ponctuel', 'label': 'Ponctuel (pour un acte précis)'},
                    {'value': '6_mois', 'label': '6 mois'},
                    {'value': '1_an', 'label': '1 an'},
                    {'value': 'duree_libre', 'label': 'Autre durée (à préciser)'},
                ],
            },
            {
                'id': 'duree_precise',
                'text': 'Précisez la durée',
                'type': 'text',
                'required': False,
                'depends_on': 'duree_mandat',
                'placeholder': "Ex: Jusqu'au 31/12/2025",
            },
            {
                'id': 'conditions_fin',
                'text': 'Conditions de fin du mandat (optionnel)',
                'type': 'textarea',
                'required': False,
                'placeholder': 'Conditions particulières mettant fin au mandat...',
            },
        ],
        'document_body': '''
PROCURATION

Je soussigné(e) :

MANDANT :
{{mandant_nom}}
Né(e) le {{mandant_naissance}}
Nationalité : {{mandant_nationalite}}
{{#mandant_profession}}Profession : {{mandant_profession}}{{/mandant_profession}}
Demeurant : {{mandant_adresse}}

DONNE PROCURATION À :

MANDATAIRE :
{{mandataire_nom}}
Né(e) le {{mandataire_naissance}}
Nationalité : {{mandataire_nationalite}}
{{#mandataire_profession}}Profession : {{mandataire_profession}}{{/mandataire_profession}}
Demeurant : {{mandataire_adresse}}

OBJET DE LA PROCURATION :
{{objet_mandat}}

{{#tribunal_concerne}}
Tribunal concerné : {{tribunal_concerne}}
{{#numero_procedure}}Numéro de procédure : {{numero_procedure}}{{/numero_procedure}}
{{/tribunal_concerne}}

{{#duree_mandat}}
DURÉE :
{{#eq duree_mandat "ponctuel"}}Cette procuration est valable pour l'accomplissement de l'acte décrit ci-dessus.{{/eq}}
{{#eq duree_mandat "duree_libre"}}Cette procuration est valable {{duree_precise}}.{{/eq}}
{{#ne duree_mandat "ponctuel"}}{{#ne duree_mandat "duree_libre"}}Cette procuration est valable pour une durée de {{duree_mandat}}.{{/ne}}{{/ne}}
{{/duree_mandat}}

{{#conditions_fin}}
CONDITIONS DE FIN :
{{conditions_fin}}
{{/conditions_fin}}

Je déclare que cette procuration est donnée en toute connaissance de cause et que le mandataire est habilité à agir en mon nom et pour mon compte dans les limites des pouvoirs qui lui sont conférés.

PIÈCES JOINTES :
- Copie de la pièce d'identité du mandant
- Copie de la pièce d'identité du mandataire

Fait à __________________, le __________________

Signature du mandant                  Signature du mandataire
(précédée de "Bon pour procuration") (précédée de "J'accepte cette procuration")


________________________             ________________________
''',
    },
]
