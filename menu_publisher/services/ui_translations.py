"""Static display strings for the public viewer, keyed by language code."""

UI_TRANSLATIONS = {
    "en": {
        "from": "from ",
        "options": "Options:",
        "extras": "Extras:",
        "addons": "Add-ons:",
        "allergens": "Allergens:",
        "vegetarian": "🌱 Vegetarian",
        "vegan": "🌱 Vegan",
        "spicy": "🌶️ Spicy",
        "allergiesTitle": "Allergy Information",
        "allergiesDescription": "Menu items containing these allergens are marked with the corresponding icons",
        "allergiesFooter": "Please inform your server of any allergies or dietary requirements",
        "showAllergies": "Show allergens",
        "hideAllergies": "Hide allergens",
        "thankYouMessage": "Thank you for dining with us!",
        "followFacebook": "Follow us on Facebook",
        "welcomeMessage": "Welcome to our restaurant! Browse our delicious menu offerings below.",
        "errorLoadingMenus": "Error Loading Menus",
        "noMenusAvailable": "No Menus Available",
        "menuUpdatingMessage": "We're currently updating our menu offerings. Please check back soon for our latest delicious options!",
        "menuNotFound": "The requested menu could not be found.",
        "ourMenus": "Our Menus",
        "viewMenu": "View Menu",
    },
    "es": {
        "from": "desde ",
        "options": "Opciones:",
        "extras": "Extras:",
        "addons": "Complementos:",
        "allergens": "Alérgenos:",
        "vegetarian": "🌱 Vegetariano",
        "vegan": "🌱 Vegano",
        "spicy": "🌶️ Picante",
        "allergiesTitle": "Información sobre Alergias",
        "allergiesDescription": "Los elementos del menú que contienen estos alérgenos están marcados con los iconos correspondientes",
        "allergiesFooter": "Informe a su camarero sobre cualquier alergia o requisito dietético",
        "showAllergies": "Mostrar alérgenos",
        "hideAllergies": "Ocultar alérgenos",
        "thankYouMessage": "¡Gracias por cenar con nosotros!",
        "followFacebook": "Síguenos en Facebook",
        "welcomeMessage": "¡Bienvenido a nuestro restaurante! Explore nuestras deliciosas ofertas de menú a continuación.",
        "errorLoadingMenus": "Error al Cargar los Menús",
        "noMenusAvailable": "No Hay Menús Disponibles",
        "menuUpdatingMessage": "Actualmente estamos actualizando nuestras ofertas de menú. ¡Vuelve pronto para conocer nuestras últimas opciones deliciosas!",
        "menuNotFound": "No se pudo encontrar el menú solicitado.",
        "ourMenus": "Nuestros Menús",
        "viewMenu": "Ver Menú",
    },
    "de": {
        "from": "ab ",
        "options": "Optionen:",
        "extras": "Extras:",
        "addons": "Beilagen:",
        "allergens": "Allergene:",
        "vegetarian": "🌱 Vegetarisch",
        "vegan": "🌱 Vegan",
        "spicy": "🌶️ Scharf",
        "allergiesTitle": "Allergie-Informationen",
        "allergiesDescription": "Menüpunkte, die diese Allergene enthalten, sind mit den entsprechenden Symbolen gekennzeichnet",
        "allergiesFooter": "Bitte informieren Sie Ihren Kellner über Allergien oder Ernährungsanforderungen",
        "showAllergies": "Allergene anzeigen",
        "hideAllergies": "Allergene ausblenden",
        "thankYouMessage": "Vielen Dank, dass Sie bei uns speisen!",
        "followFacebook": "Folgen Sie uns auf Facebook",
        "welcomeMessage": "Willkommen in unserem Restaurant! Stöbern Sie unten in unseren köstlichen Menüangeboten.",
        "errorLoadingMenus": "Fehler beim Laden der Menüs",
        "noMenusAvailable": "Keine Menüs Verfügbar",
        "menuUpdatingMessage": "Wir aktualisieren derzeit unsere Menüangebote. Schauen Sie bald wieder vorbei für unsere neuesten köstlichen Optionen!",
        "menuNotFound": "Das angeforderte Menü wurde nicht gefunden.",
        "ourMenus": "Unsere Menüs",
        "viewMenu": "Menü Anzeigen",
    },
    "nl": {
        "from": "vanaf ",
        "options": "Opties:",
        "extras": "Extra's:",
        "allergens": "Allergenen:",
        "vegetarian": "🌱 Vegetarisch",
        "vegan": "🌱 Veganistisch",
        "spicy": "🌶️ Pittig",
        "allergiesTitle": "Allergie Informatie",
        "allergiesDescription": "Menu-items die deze allergenen bevatten zijn gemarkeerd met de bijbehorende pictogrammen",
        "allergiesFooter": "Informeer uw bediening over eventuele allergieën of dieetwensen",
        "thankYouMessage": "Dank je wel voor het dineren bij ons!",
        "followFacebook": "Volg ons op Facebook",
        "welcomeMessage": "Welkom in ons restaurant! Bekijk hieronder onze heerlijke menu-aanbiedingen.",
        "errorLoadingMenus": "Fout bij het Laden van Menu's",
        "noMenusAvailable": "Geen Menu's Beschikbaar",
        "menuUpdatingMessage": "We zijn momenteel onze menu-aanbiedingen aan het bijwerken. Kom binnenkort terug voor onze nieuwste heerlijke opties!",
        "ourMenus": "Onze Menu's",
        "viewMenu": "Bekijk Menu",
    },
    "fr": {
        "from": "à partir de ",
        "options": "Options:",
        "extras": "Suppléments:",
        "allergens": "Allergènes:",
        "vegetarian": "🌱 Végétarien",
        "vegan": "🌱 Végan",
        "spicy": "🌶️ Épicé",
        "allergiesTitle": "Informations sur les Allergies",
        "allergiesDescription": "Les éléments du menu contenant ces allergènes sont marqués avec les icônes correspondantes",
        "allergiesFooter": "Veuillez informer votre serveur de toute allergie ou exigence alimentaire",
        "thankYouMessage": "Merci d'avoir dîné avec nous!",
        "followFacebook": "Suivez-nous sur Facebook",
        "welcomeMessage": "Bienvenue dans notre restaurant! Parcourez nos délicieuses offres de menu ci-dessous.",
        "errorLoadingMenus": "Erreur lors du Chargement des Menus",
        "noMenusAvailable": "Aucun Menu Disponible",
        "menuUpdatingMessage": "Nous mettons actuellement à jour nos offres de menu. Revenez bientôt pour nos dernières délicieuses options!",
        "ourMenus": "Nos Menus",
        "viewMenu": "Voir le Menu",
    },
    "it": {
        "from": "da ",
        "options": "Opzioni:",
        "extras": "Extra:",
        "allergens": "Allergeni:",
        "vegetarian": "🌱 Vegetariano",
        "vegan": "🌱 Vegano",
        "spicy": "🌶️ Piccante",
        "allergiesTitle": "Informazioni sulle Allergie",
        "allergiesDescription": "Gli elementi del menu che contengono questi allergeni sono contrassegnati con le icone corrispondenti",
        "allergiesFooter": "Si prega di informare il cameriere di eventuali allergie o requisiti dietetici",
        "thankYouMessage": "Grazie per aver cenato con noi!",
        "followFacebook": "Seguici su Facebook",
        "welcomeMessage": "Benvenuti nel nostro ristorante! Sfoglia le nostre deliziose offerte di menu qui sotto.",
        "errorLoadingMenus": "Errore nel Caricamento dei Menu",
        "noMenusAvailable": "Nessun Menu Disponibile",
        "menuUpdatingMessage": "Stiamo attualmente aggiornando le nostre offerte di menu. Torna presto per le nostre ultime deliziose opzioni!",
        "ourMenus": "I Nostri Menu",
        "viewMenu": "Visualizza Menu",
    },
    "pt": {
        "from": "a partir de ",
        "options": "Opções:",
        "extras": "Extras:",
        "allergens": "Alérgenos:",
        "vegetarian": "🌱 Vegetariano",
        "vegan": "🌱 Vegano",
        "spicy": "🌶️ Picante",
        "allergiesTitle": "Informações sobre Alergias",
        "allergiesDescription": "Os itens do menu que contêm estes alérgenos estão marcados com os ícones correspondentes",
        "allergiesFooter": "Por favor, informe o seu garçom sobre quaisquer alergias ou requisitos dietéticos",
        "thankYouMessage": "Obrigado por jantar conosco!",
        "followFacebook": "Siga-nos no Facebook",
        "welcomeMessage": "Bem-vindos ao nosso restaurante! Navegue pelas nossas deliciosas ofertas de menu abaixo.",
        "errorLoadingMenus": "Erro ao Carregar Menus",
        "noMenusAvailable": "Nenhum Menu Disponível",
        "menuUpdatingMessage": "Estamos atualmente atualizando nossas ofertas de menu. Volte em breve para nossas últimas opções deliciosas!",
        "ourMenus": "Nossos Menus",
        "viewMenu": "Ver Menu",
    },
}

# Display names for canonical allergy keys (see allergy_icons.SYNONYMS).
ALLERGY_NAME_TRANSLATIONS = {
    "en": {
        "celery": "Celery",
        "corn": "Corn",
        "crustaceans": "Crustaceans",
        "eggs": "Eggs",
        "fish": "Fish",
        "gluten": "Gluten",
        "lupin": "Lupin",
        "milk": "Milk",
        "mollusc": "Molluscs",
        "mustard": "Mustard",
        "nuts": "Nuts",
        "peanuts": "Peanuts",
        "propolis": "Propolis",
        "sesame": "Sesame",
        "soya": "Soya",
        "sulphites": "Sulphites",
    },
    "es": {
        "celery": "Apio",
        "corn": "Maíz",
        "crustaceans": "Crustáceos",
        "eggs": "Huevos",
        "fish": "Pescado",
        "gluten": "Gluten",
        "lupin": "Altramuces",
        "milk": "Lácteos",
        "mollusc": "Moluscos",
        "mustard": "Mostaza",
        "nuts": "Frutos de cáscara",
        "peanuts": "Cacahuetes",
        "propolis": "Propóleo",
        "sesame": "Sésamo",
        "soya": "Soja",
        "sulphites": "Sulfitos",
    },
    "de": {
        "celery": "Sellerie",
        "corn": "Mais",
        "crustaceans": "Krebstiere",
        "eggs": "Eier",
        "fish": "Fisch",
        "gluten": "Gluten",
        "lupin": "Lupinen",
        "milk": "Milch",
        "mollusc": "Weichtiere",
        "mustard": "Senf",
        "nuts": "Schalenfrüchte",
        "peanuts": "Erdnüsse",
        "propolis": "Propolis",
        "sesame": "Sesam",
        "soya": "Soja",
        "sulphites": "Sulfite",
    },
}

__all__ = ["UI_TRANSLATIONS", "ALLERGY_NAME_TRANSLATIONS"]
