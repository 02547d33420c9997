"""Known target framework identifiers, short names and profile aliases."""

from typing import Dict

NET_FRAMEWORK = ".NETFramework"
NET_CORE = ".NETCore"
NET_PORTABLE = ".NETPortable"
NET_MICRO_FRAMEWORK = ".NETMicroFramework"
WINDOWS = "Windows"
WINDOWS_PHONE = "WindowsPhone"
WINDOWS_PHONE_APP = "WindowsPhoneApp"
SILVERLIGHT = "Silverlight"
MONO_ANDROID = "MonoAndroid"
MONO_TOUCH = "MonoTouch"
MONO_MAC = "MonoMac"
XAMARIN_IOS = "Xamarin.iOS"
XAMARIN_MAC = "Xamarin.Mac"
ASP_NET = "ASP.NET"
ASP_NET_CORE = "ASP.NETCore"
DNX = "DNX"
DNX_CORE = "DNXCore"
UAP = "UAP"
NATIVE = "native"
ANY = "Any"

# Canonical identifier -> short moniker used in folder names and nuspec attributes.
SHORT_NAMES: Dict[str, str] = {
    NET_FRAMEWORK: "net",
    NET_CORE: "netcore",
    NET_PORTABLE: "portable",
    NET_MICRO_FRAMEWORK: "netmf",
    WINDOWS: "win",
    WINDOWS_PHONE: "wp",
    WINDOWS_PHONE_APP: "wpa",
    SILVERLIGHT: "sl",
    MONO_ANDROID: "monoandroid",
    MONO_TOUCH: "monotouch",
    MONO_MAC: "monomac",
    XAMARIN_IOS: "xamarinios",
    XAMARIN_MAC: "xamarinmac",
    ASP_NET: "aspnet",
    ASP_NET_CORE: "aspnetcore",
    DNX: "dnx",
    DNX_CORE: "dnxcore",
    UAP: "uap",
    NATIVE: "native",
    ANY: "any",
}

# Lowercased spelling -> canonical identifier. Both short and full names resolve.
IDENTIFIERS: Dict[str, str] = {}
for _canonical, _short in SHORT_NAMES.items():
    IDENTIFIERS[_short] = _canonical
    IDENTIFIERS[_canonical.lower()] = _canonical
IDENTIFIERS.update({
    "netframework": NET_FRAMEWORK,
    "winrt": NET_CORE,
    "windowsphone": WINDOWS_PHONE,
    "windowsphoneapp": WINDOWS_PHONE_APP,
    "silverlight": SILVERLIGHT,
    "xamarin.ios": XAMARIN_IOS,
    "xamarin.mac": XAMARIN_MAC,
})

# Lowercased profile alias -> canonical profile ("" means no profile).
PROFILES: Dict[str, str] = {
    "client": "Client",
    "full": "",
    "wp": "WindowsPhone",
    "wp71": "WindowsPhone71",
    "cf": "CompactFramework",
}

PROFILE_SHORT_NAMES: Dict[str, str] = {
    canonical.lower(): alias for alias, canonical in PROFILES.items() if canonical
}
