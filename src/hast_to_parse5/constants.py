"""Static tables: namespace URIs and the property definitions schemas are built from."""

from __future__ import annotations

NAMESPACES: dict[str, str] = {
    "html": "http://www.w3.org/1999/xhtml",
    "mathml": "http://www.w3.org/1998/Math/MathML",
    "svg": "http://www.w3.org/2000/svg",
    "xlink": "http://www.w3.org/1999/xlink",
    "xml": "http://www.w3.org/XML/1998/namespace",
    "xmlns": "http://www.w3.org/2000/xmlns/",
}

# Property type flags, combinable with `|`.
BOOLEAN = 1
BOOLEANISH = 2
OVERLOADED_BOOLEAN = 4
NUMBER = 8
SPACE_SEPARATED = 16
COMMA_SEPARATED = 32
COMMA_OR_SPACE_SEPARATED = 64

XLINK_PROPERTIES: dict[str, int] = {
    "xLinkActuate": 0,
    "xLinkArcRole": 0,
    "xLinkHref": 0,
    "xLinkRole": 0,
    "xLinkShow": 0,
    "xLinkTitle": 0,
    "xLinkType": 0,
}

XML_PROPERTIES: dict[str, int] = {
    "xmlLang": 0,
    "xmlBase": 0,
    "xmlSpace": 0,
}

XMLNS_ATTRIBUTES: dict[str, str] = {"xmlnsxlink": "xmlns:xlink"}

XMLNS_PROPERTIES: dict[str, int] = {
    "xmlnsXLink": 0,
    "xmlns": 0,
}

ARIA_PROPERTIES: dict[str, int] = {
    "ariaActiveDescendant": 0,
    "ariaAtomic": BOOLEANISH,
    "ariaAutoComplete": 0,
    "ariaBusy": BOOLEANISH,
    "ariaChecked": BOOLEANISH,
    "ariaColCount": NUMBER,
    "ariaColIndex": NUMBER,
    "ariaColSpan": NUMBER,
    "ariaControls": SPACE_SEPARATED,
    "ariaCurrent": 0,
    "ariaDescribedBy": SPACE_SEPARATED,
    "ariaDetails": 0,
    "ariaDisabled": BOOLEANISH,
    "ariaDropEffect": SPACE_SEPARATED,
    "ariaErrorMessage": 0,
    "ariaExpanded": BOOLEANISH,
    "ariaFlowTo": SPACE_SEPARATED,
    "ariaGrabbed": BOOLEANISH,
    "ariaHasPopup": 0,
    "ariaHidden": BOOLEANISH,
    "ariaInvalid": 0,
    "ariaKeyShortcuts": 0,
    "ariaLabel": 0,
    "ariaLabelledBy": SPACE_SEPARATED,
    "ariaLevel": NUMBER,
    "ariaLive": 0,
    "ariaModal": BOOLEANISH,
    "ariaMultiLine": BOOLEANISH,
    "ariaMultiSelectable": BOOLEANISH,
    "ariaOrientation": 0,
    "ariaOwns": SPACE_SEPARATED,
    "ariaPlaceholder": 0,
    "ariaPosInSet": NUMBER,
    "ariaPressed": BOOLEANISH,
    "ariaReadOnly": BOOLEANISH,
    "ariaRelevant": 0,
    "ariaRequired": BOOLEANISH,
    "ariaRoleDescription": SPACE_SEPARATED,
    "ariaRowCount": NUMBER,
    "ariaRowIndex": NUMBER,
    "ariaRowSpan": NUMBER,
    "ariaSelected": BOOLEANISH,
    "ariaSetSize": NUMBER,
    "ariaSort": 0,
    "ariaValueMax": NUMBER,
    "ariaValueMin": NUMBER,
    "ariaValueNow": NUMBER,
    "ariaValueText": 0,
    "role": 0,
}

# Event handler content attributes shared by HTML and SVG.
EVENT_HANDLERS: tuple[str, ...] = (
    "onAbort",
    "onAfterPrint",
    "onAuxClick",
    "onBeforeMatch",
    "onBeforePrint",
    "onBeforeToggle",
    "onBeforeUnload",
    "onBlur",
    "onCancel",
    "onCanPlay",
    "onCanPlayThrough",
    "onChange",
    "onClick",
    "onClose",
    "onContextLost",
    "onContextMenu",
    "onContextRestored",
    "onCopy",
    "onCueChange",
    "onCut",
    "onDblClick",
    "onDrag",
    "onDragEnd",
    "onDragEnter",
    "onDragExit",
    "onDragLeave",
    "onDragOver",
    "onDragStart",
    "onDrop",
    "onDurationChange",
    "onEmptied",
    "onEnded",
    "onError",
    "onFocus",
    "onFormData",
    "onHashChange",
    "onInput",
    "onInvalid",
    "onKeyDown",
    "onKeyPress",
    "onKeyUp",
    "onLanguageChange",
    "onLoad",
    "onLoadedData",
    "onLoadedMetadata",
    "onLoadEnd",
    "onLoadStart",
    "onMessage",
    "onMessageError",
    "onMouseDown",
    "onMouseEnter",
    "onMouseLeave",
    "onMouseMove",
    "onMouseOut",
    "onMouseOver",
    "onMouseUp",
    "onOffline",
    "onOnline",
    "onPageHide",
    "onPageShow",
    "onPaste",
    "onPause",
    "onPlay",
    "onPlaying",
    "onPopState",
    "onProgress",
    "onRateChange",
    "onRejectionHandled",
    "onReset",
    "onResize",
    "onScroll",
    "onScrollEnd",
    "onSecurityPolicyViolation",
    "onSeeked",
    "onSeeking",
    "onSelect",
    "onSlotChange",
    "onStalled",
    "onStorage",
    "onSubmit",
    "onSuspend",
    "onTimeUpdate",
    "onToggle",
    "onUnhandledRejection",
    "onUnload",
    "onVolumeChange",
    "onWaiting",
    "onWheel",
)

HTML_ATTRIBUTES: dict[str, str] = {
    "acceptcharset": "accept-charset",
    "classname": "class",
    "htmlfor": "for",
    "httpequiv": "http-equiv",
}

HTML_PROPERTIES: dict[str, int] = {
    "abbr": 0,
    "accept": COMMA_SEPARATED,
    "acceptCharset": SPACE_SEPARATED,
    "accessKey": SPACE_SEPARATED,
    "action": 0,
    "allow": 0,
    "allowFullScreen": BOOLEAN,
    "allowPaymentRequest": BOOLEAN,
    "allowUserMedia": BOOLEAN,
    "alt": 0,
    "as": 0,
    "async": BOOLEAN,
    "autoCapitalize": 0,
    "autoComplete": SPACE_SEPARATED,
    "autoFocus": BOOLEAN,
    "autoPlay": BOOLEAN,
    "blocking": SPACE_SEPARATED,
    "capture": 0,
    "charSet": 0,
    "checked": BOOLEAN,
    "cite": 0,
    "className": SPACE_SEPARATED,
    "cols": NUMBER,
    "colSpan": 0,
    "content": 0,
    "contentEditable": BOOLEANISH,
    "controls": BOOLEAN,
    "controlsList": SPACE_SEPARATED,
    "coords": NUMBER | COMMA_SEPARATED,
    "crossOrigin": 0,
    "data": 0,
    "dateTime": 0,
    "decoding": 0,
    "default": BOOLEAN,
    "defer": BOOLEAN,
    "dir": 0,
    "dirName": 0,
    "disabled": BOOLEAN,
    "download": OVERLOADED_BOOLEAN,
    "draggable": BOOLEANISH,
    "encType": 0,
    "enterKeyHint": 0,
    "fetchPriority": 0,
    "form": 0,
    "formAction": 0,
    "formEncType": 0,
    "formMethod": 0,
    "formNoValidate": BOOLEAN,
    "formTarget": 0,
    "headers": SPACE_SEPARATED,
    "height": NUMBER,
    "hidden": BOOLEAN,
    "high": NUMBER,
    "href": 0,
    "hrefLang": 0,
    "htmlFor": SPACE_SEPARATED,
    "httpEquiv": SPACE_SEPARATED,
    "id": 0,
    "imageSizes": 0,
    "imageSrcSet": 0,
    "inert": BOOLEAN,
    "inputMode": 0,
    "integrity": 0,
    "is": 0,
    "isMap": BOOLEAN,
    "itemId": 0,
    "itemProp": SPACE_SEPARATED,
    "itemRef": SPACE_SEPARATED,
    "itemScope": BOOLEAN,
    "itemType": SPACE_SEPARATED,
    "kind": 0,
    "label": 0,
    "lang": 0,
    "language": 0,
    "list": 0,
    "loading": 0,
    "loop": BOOLEAN,
    "low": NUMBER,
    "manifest": 0,
    "max": 0,
    "maxLength": NUMBER,
    "media": 0,
    "method": 0,
    "min": 0,
    "minLength": NUMBER,
    "multiple": BOOLEAN,
    "muted": BOOLEAN,
    "name": 0,
    "nonce": 0,
    "noModule": BOOLEAN,
    "noValidate": BOOLEAN,
    "open": BOOLEAN,
    "optimum": NUMBER,
    "pattern": 0,
    "ping": SPACE_SEPARATED,
    "placeholder": 0,
    "playsInline": BOOLEAN,
    "popover": 0,
    "popoverTarget": 0,
    "popoverTargetAction": 0,
    "poster": 0,
    "preload": 0,
    "readOnly": BOOLEAN,
    "referrerPolicy": 0,
    "rel": SPACE_SEPARATED,
    "required": BOOLEAN,
    "reversed": BOOLEAN,
    "rows": NUMBER,
    "rowSpan": NUMBER,
    "sandbox": SPACE_SEPARATED,
    "scope": 0,
    "scoped": BOOLEAN,
    "seamless": BOOLEAN,
    "selected": BOOLEAN,
    "shadowRootClonable": BOOLEAN,
    "shadowRootDelegatesFocus": BOOLEAN,
    "shadowRootMode": 0,
    "shape": 0,
    "size": NUMBER,
    "sizes": 0,
    "slot": 0,
    "span": NUMBER,
    "spellCheck": BOOLEANISH,
    "src": 0,
    "srcDoc": 0,
    "srcLang": 0,
    "srcSet": 0,
    "start": NUMBER,
    "step": 0,
    "style": 0,
    "tabIndex": NUMBER,
    "target": 0,
    "title": 0,
    "translate": 0,
    "type": 0,
    "typeMustMatch": BOOLEAN,
    "useMap": 0,
    "value": BOOLEANISH,
    "width": NUMBER,
    "wrap": 0,
    "writingSuggestions": 0,
    # Legacy.
    "align": 0,
    "aLink": 0,
    "archive": SPACE_SEPARATED,
    "axis": 0,
    "background": 0,
    "bgColor": 0,
    "border": NUMBER,
    "borderColor": 0,
    "bottomMargin": NUMBER,
    "cellPadding": 0,
    "cellSpacing": 0,
    "char": 0,
    "charOff": 0,
    "classId": 0,
    "clear": 0,
    "code": 0,
    "codeBase": 0,
    "codeType": 0,
    "color": 0,
    "compact": BOOLEAN,
    "declare": BOOLEAN,
    "event": 0,
    "face": 0,
    "frame": 0,
    "frameBorder": 0,
    "hSpace": NUMBER,
    "leftMargin": NUMBER,
    "link": 0,
    "longDesc": 0,
    "lowSrc": 0,
    "marginHeight": NUMBER,
    "marginWidth": NUMBER,
    "noResize": BOOLEAN,
    "noHref": BOOLEAN,
    "noShade": BOOLEAN,
    "noWrap": BOOLEAN,
    "object": 0,
    "profile": 0,
    "prompt": 0,
    "rev": 0,
    "rightMargin": NUMBER,
    "rules": 0,
    "scheme": 0,
    "scrolling": BOOLEANISH,
    "standby": 0,
    "summary": 0,
    "text": 0,
    "topMargin": NUMBER,
    "valueType": 0,
    "version": 0,
    "vAlign": 0,
    "vLink": 0,
    "vSpace": NUMBER,
    # Non-standard.
    "allowTransparency": 0,
    "autoCorrect": 0,
    "autoSave": 0,
    "disablePictureInPicture": BOOLEAN,
    "disableRemotePlayback": BOOLEAN,
    "prefix": 0,
    "property": 0,
    "results": NUMBER,
    "security": 0,
    "unselectable": 0,
}

# SVG attribute names are case-sensitive; only the irregular ones are listed.
SVG_ATTRIBUTES: dict[str, str] = {
    "accentHeight": "accent-height",
    "alignmentBaseline": "alignment-baseline",
    "arabicForm": "arabic-form",
    "baselineShift": "baseline-shift",
    "capHeight": "cap-height",
    "className": "class",
    "clipPath": "clip-path",
    "clipRule": "clip-rule",
    "colorInterpolation": "color-interpolation",
    "colorInterpolationFilters": "color-interpolation-filters",
    "colorProfile": "color-profile",
    "colorRendering": "color-rendering",
    "crossOrigin": "crossorigin",
    "dataType": "datatype",
    "dominantBaseline": "dominant-baseline",
    "enableBackground": "enable-background",
    "fillOpacity": "fill-opacity",
    "fillRule": "fill-rule",
    "floodColor": "flood-color",
    "floodOpacity": "flood-opacity",
    "fontFamily": "font-family",
    "fontSize": "font-size",
    "fontSizeAdjust": "font-size-adjust",
    "fontStretch": "font-stretch",
    "fontStyle": "font-style",
    "fontVariant": "font-variant",
    "fontWeight": "font-weight",
    "glyphName": "glyph-name",
    "glyphOrientationHorizontal": "glyph-orientation-horizontal",
    "glyphOrientationVertical": "glyph-orientation-vertical",
    "hrefLang": "hreflang",
    "horizAdvX": "horiz-adv-x",
    "horizOriginX": "horiz-origin-x",
    "horizOriginY": "horiz-origin-y",
    "imageRendering": "image-rendering",
    "letterSpacing": "letter-spacing",
    "lightingColor": "lighting-color",
    "markerEnd": "marker-end",
    "markerMid": "marker-mid",
    "markerStart": "marker-start",
    "navDown": "nav-down",
    "navDownLeft": "nav-down-left",
    "navDownRight": "nav-down-right",
    "navLeft": "nav-left",
    "navNext": "nav-next",
    "navPrev": "nav-prev",
    "navRight": "nav-right",
    "navUp": "nav-up",
    "navUpLeft": "nav-up-left",
    "navUpRight": "nav-up-right",
    "overlinePosition": "overline-position",
    "overlineThickness": "overline-thickness",
    "paintOrder": "paint-order",
    "panose1": "panose-1",
    "playbackOrder": "playbackorder",
    "pointerEvents": "pointer-events",
    "referrerPolicy": "referrerpolicy",
    "renderingIntent": "rendering-intent",
    "shapeRendering": "shape-rendering",
    "stopColor": "stop-color",
    "stopOpacity": "stop-opacity",
    "strikethroughPosition": "strikethrough-position",
    "strikethroughThickness": "strikethrough-thickness",
    "strokeDashArray": "stroke-dasharray",
    "strokeDashOffset": "stroke-dashoffset",
    "strokeLineCap": "stroke-linecap",
    "strokeLineJoin": "stroke-linejoin",
    "strokeMiterLimit": "stroke-miterlimit",
    "strokeOpacity": "stroke-opacity",
    "strokeWidth": "stroke-width",
    "tabIndex": "tabindex",
    "textAnchor": "text-anchor",
    "textDecoration": "text-decoration",
    "textRendering": "text-rendering",
    "timelineBegin": "timelinebegin",
    "transformOrigin": "transform-origin",
    "typeOf": "typeof",
    "underlinePosition": "underline-position",
    "underlineThickness": "underline-thickness",
    "unicodeBidi": "unicode-bidi",
    "unicodeRange": "unicode-range",
    "unitsPerEm": "units-per-em",
    "vAlphabetic": "v-alphabetic",
    "vHanging": "v-hanging",
    "vIdeographic": "v-ideographic",
    "vMathematical": "v-mathematical",
    "vectorEffect": "vector-effect",
    "vertAdvY": "vert-adv-y",
    "vertOriginX": "vert-origin-x",
    "vertOriginY": "vert-origin-y",
    "wordSpacing": "word-spacing",
    "writingMode": "writing-mode",
    "xHeight": "x-height",
}

SVG_PROPERTIES: dict[str, int] = {
    "about": COMMA_OR_SPACE_SEPARATED,
    "accentHeight": NUMBER,
    "accumulate": 0,
    "additive": 0,
    "alignmentBaseline": 0,
    "alphabetic": NUMBER,
    "amplitude": NUMBER,
    "arabicForm": 0,
    "ascent": NUMBER,
    "attributeName": 0,
    "attributeType": 0,
    "azimuth": NUMBER,
    "bandwidth": 0,
    "baselineShift": 0,
    "baseFrequency": 0,
    "baseProfile": 0,
    "bbox": 0,
    "begin": 0,
    "bias": NUMBER,
    "by": 0,
    "calcMode": 0,
    "capHeight": NUMBER,
    "className": SPACE_SEPARATED,
    "clip": 0,
    "clipPath": 0,
    "clipPathUnits": 0,
    "clipRule": 0,
    "color": 0,
    "colorInterpolation": 0,
    "colorInterpolationFilters": 0,
    "colorProfile": 0,
    "colorRendering": 0,
    "content": 0,
    "contentScriptType": 0,
    "contentStyleType": 0,
    "crossOrigin": 0,
    "cursor": 0,
    "cx": 0,
    "cy": 0,
    "d": 0,
    "dataType": 0,
    "defaultAction": 0,
    "descent": NUMBER,
    "diffuseConstant": NUMBER,
    "direction": 0,
    "display": 0,
    "dur": 0,
    "divisor": NUMBER,
    "dominantBaseline": 0,
    "download": BOOLEAN,
    "dx": 0,
    "dy": 0,
    "edgeMode": 0,
    "editable": 0,
    "elevation": NUMBER,
    "enableBackground": 0,
    "end": 0,
    "event": 0,
    "exponent": NUMBER,
    "externalResourcesRequired": 0,
    "fill": 0,
    "fillOpacity": NUMBER,
    "fillRule": 0,
    "filter": 0,
    "filterRes": 0,
    "filterUnits": 0,
    "floodColor": 0,
    "floodOpacity": 0,
    "focusable": 0,
    "focusHighlight": 0,
    "fontFamily": 0,
    "fontSize": 0,
    "fontSizeAdjust": 0,
    "fontStretch": 0,
    "fontStyle": 0,
    "fontVariant": 0,
    "fontWeight": 0,
    "format": 0,
    "fr": 0,
    "from": 0,
    "fx": 0,
    "fy": 0,
    "g1": COMMA_SEPARATED,
    "g2": COMMA_SEPARATED,
    "glyphName": COMMA_SEPARATED,
    "glyphOrientationHorizontal": 0,
    "glyphOrientationVertical": 0,
    "glyphRef": 0,
    "gradientTransform": 0,
    "gradientUnits": 0,
    "handler": 0,
    "hanging": NUMBER,
    "hatchContentUnits": 0,
    "hatchUnits": 0,
    "height": 0,
    "href": 0,
    "hrefLang": 0,
    "horizAdvX": NUMBER,
    "horizOriginX": NUMBER,
    "horizOriginY": NUMBER,
    "id": 0,
    "ideographic": NUMBER,
    "imageRendering": 0,
    "initialVisibility": 0,
    "in": 0,
    "in2": 0,
    "intercept": NUMBER,
    "k": NUMBER,
    "k1": NUMBER,
    "k2": NUMBER,
    "k3": NUMBER,
    "k4": NUMBER,
    "kernelMatrix": COMMA_OR_SPACE_SEPARATED,
    "kernelUnitLength": 0,
    "keyPoints": 0,
    "keySplines": 0,
    "keyTimes": 0,
    "kerning": 0,
    "lang": 0,
    "lengthAdjust": 0,
    "letterSpacing": 0,
    "lightingColor": 0,
    "limitingConeAngle": NUMBER,
    "local": 0,
    "markerEnd": 0,
    "markerMid": 0,
    "markerStart": 0,
    "markerHeight": 0,
    "markerUnits": 0,
    "markerWidth": 0,
    "mask": 0,
    "maskContentUnits": 0,
    "maskUnits": 0,
    "mathematical": 0,
    "max": 0,
    "media": 0,
    "mediaCharacterEncoding": 0,
    "mediaContentEncodings": 0,
    "mediaSize": NUMBER,
    "mediaTime": 0,
    "method": 0,
    "min": 0,
    "mode": 0,
    "name": 0,
    "navDown": 0,
    "navDownLeft": 0,
    "navDownRight": 0,
    "navLeft": 0,
    "navNext": 0,
    "navPrev": 0,
    "navRight": 0,
    "navUp": 0,
    "navUpLeft": 0,
    "navUpRight": 0,
    "numOctaves": 0,
    "observer": 0,
    "offset": 0,
    "opacity": 0,
    "operator": 0,
    "order": 0,
    "orient": 0,
    "orientation": 0,
    "origin": 0,
    "overflow": 0,
    "overlay": 0,
    "overlinePosition": NUMBER,
    "overlineThickness": NUMBER,
    "paintOrder": 0,
    "panose1": 0,
    "path": 0,
    "pathLength": NUMBER,
    "patternContentUnits": 0,
    "patternTransform": 0,
    "patternUnits": 0,
    "phase": 0,
    "ping": SPACE_SEPARATED,
    "pitch": 0,
    "playbackOrder": 0,
    "pointerEvents": 0,
    "points": 0,
    "pointsAtX": NUMBER,
    "pointsAtY": NUMBER,
    "pointsAtZ": NUMBER,
    "preserveAlpha": 0,
    "preserveAspectRatio": 0,
    "primitiveUnits": 0,
    "propagate": 0,
    "property": COMMA_OR_SPACE_SEPARATED,
    "r": 0,
    "radius": 0,
    "referrerPolicy": 0,
    "refX": 0,
    "refY": 0,
    "rel": COMMA_OR_SPACE_SEPARATED,
    "rev": COMMA_OR_SPACE_SEPARATED,
    "renderingIntent": 0,
    "repeatCount": 0,
    "repeatDur": 0,
    "requiredExtensions": COMMA_OR_SPACE_SEPARATED,
    "requiredFeatures": COMMA_OR_SPACE_SEPARATED,
    "requiredFonts": COMMA_OR_SPACE_SEPARATED,
    "requiredFormats": COMMA_OR_SPACE_SEPARATED,
    "resource": 0,
    "restart": 0,
    "result": 0,
    "rotate": 0,
    "rx": 0,
    "ry": 0,
    "scale": 0,
    "seed": 0,
    "shapeRendering": 0,
    "side": 0,
    "slope": 0,
    "snapshotTime": 0,
    "specularConstant": NUMBER,
    "specularExponent": NUMBER,
    "spreadMethod": 0,
    "spacing": 0,
    "startOffset": 0,
    "stdDeviation": 0,
    "stemh": 0,
    "stemv": 0,
    "stitchTiles": 0,
    "stopColor": 0,
    "stopOpacity": 0,
    "strikethroughPosition": NUMBER,
    "strikethroughThickness": NUMBER,
    "string": 0,
    "stroke": 0,
    "strokeDashArray": COMMA_OR_SPACE_SEPARATED,
    "strokeDashOffset": 0,
    "strokeLineCap": 0,
    "strokeLineJoin": 0,
    "strokeMiterLimit": NUMBER,
    "strokeOpacity": NUMBER,
    "strokeWidth": 0,
    "style": 0,
    "surfaceScale": NUMBER,
    "syncBehavior": 0,
    "syncBehaviorDefault": 0,
    "syncMaster": 0,
    "syncTolerance": 0,
    "syncToleranceDefault": 0,
    "systemLanguage": COMMA_OR_SPACE_SEPARATED,
    "tabIndex": NUMBER,
    "tableValues": 0,
    "target": 0,
    "targetX": NUMBER,
    "targetY": NUMBER,
    "textAnchor": 0,
    "textDecoration": 0,
    "textRendering": 0,
    "textLength": 0,
    "timelineBegin": 0,
    "title": 0,
    "transformBehavior": 0,
    "type": 0,
    "typeOf": COMMA_OR_SPACE_SEPARATED,
    "to": 0,
    "transform": 0,
    "transformOrigin": 0,
    "u1": 0,
    "u2": 0,
    "underlinePosition": NUMBER,
    "underlineThickness": NUMBER,
    "unicode": 0,
    "unicodeBidi": 0,
    "unicodeRange": 0,
    "unitsPerEm": NUMBER,
    "values": 0,
    "vAlphabetic": NUMBER,
    "vMathematical": NUMBER,
    "vectorEffect": 0,
    "vHanging": NUMBER,
    "vIdeographic": NUMBER,
    "version": 0,
    "vertAdvY": NUMBER,
    "vertOriginX": NUMBER,
    "vertOriginY": NUMBER,
    "viewBox": 0,
    "viewTarget": 0,
    "visibility": 0,
    "width": 0,
    "widths": 0,
    "wordSpacing": 0,
    "writingMode": 0,
    "x": 0,
    "x1": 0,
    "x2": 0,
    "xChannelSelector": 0,
    "xHeight": NUMBER,
    "y": 0,
    "y1": 0,
    "y2": 0,
    "yChannelSelector": 0,
    "z": 0,
    "zoomAndPan": 0,
}
